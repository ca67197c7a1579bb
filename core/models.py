"""
Core data models for the extraction and deduplication pipeline.

This module defines the data structures passed between the extraction,
naming, conflict-resolution and emission stages.
"""

from dataclasses import dataclass
from enum import Enum

from constants import VALUES_KEY_SEPARATOR


@dataclass
class EnumRecord:
    """
    A discovered union of string literals together with its structural provenance.

    `values` and `original_path` are fixed at extraction time. `name` is the
    only field the pipeline rewrites: once by the name deriver and at most once
    more while resolving name collisions.

    Attributes:
        name: Current semantic name. Empty until the name deriver runs.
        values: Distinct literal values in first-seen order.
        original_path: Either "type <Name>" for a standalone declaration or a
            dot-joined chain such as "GetV1UsersData.query.role".
    """

    name: str
    values: tuple[str, ...]
    original_path: str

    @property
    def values_key(self) -> str:
        """Order-insensitive signature used to detect identical value sets."""
        return VALUES_KEY_SEPARATOR.join(sorted(self.values))

    @property
    def sorted_values(self) -> list[str]:
        return sorted(self.values)


class LineKind(Enum):
    TYPE_START = "type_start"
    NESTED_OBJECT = "nested_object"
    UNION_PROPERTY = "union_property"
    OTHER = "other"


@dataclass(frozen=True)
class LineMatch:
    """
    Classification of a single normalized line.

    Attributes:
        kind: Which of the four line shapes was recognized.
        name: Type name (TYPE_START) or property name (NESTED_OBJECT, UNION_PROPERTY).
        values: Literal values carried by a UNION_PROPERTY line.
        opens_body: For TYPE_START, True when the declaration continues on
            following lines (an opening brace or nothing after "=").
    """

    kind: LineKind
    name: str | None = None
    values: tuple[str, ...] = ()
    opens_body: bool = False


@dataclass
class GenerationResult:
    """
    Outcome of a single generation run.

    Attributes:
        extracted: Raw records produced by the extractor, already named.
        records: Records that survived deduplication and filtering, in output order.
        content: The rendered output text.
        output_path: Where the content was written, if it was written at all.
    """

    extracted: list[EnumRecord]
    records: list[EnumRecord]
    content: str
    output_path: str | None = None
