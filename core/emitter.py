"""
Rendering of surviving enumerations as TypeScript constant arrays.

Each record becomes one line of the form

    export const <prefix><identifier> = ['a', 'b'] as const

with values sorted lexicographically, preceded by a fixed header comment.
"""

import re
from collections.abc import Sequence

from constants import HEADER_COMMENT, PLURAL_SUFFIXES, VALUES_SUFFIX
from core.models import EnumRecord
from utils import lower_first

_UNESCAPED_QUOTE = re.compile(r"(?<!\\)'")


def render_enum_arrays(records: Sequence[EnumRecord], array_prefix: str = "") -> str:
    """
    Render the complete output file.

    Args:
        records: Records to emit, in output order.
        array_prefix: Prepended to every identifier.

    Returns:
        The header, a blank line and one declaration per line. Just the header
        when there is nothing to emit.
    """
    arrays = "\n".join(render_declaration(r, array_prefix) for r in records)
    return "\n\n".join(part for part in (HEADER_COMMENT, arrays) if part)


def render_declaration(record: EnumRecord, array_prefix: str = "") -> str:
    array_name = array_prefix + to_array_name(record.name)
    values = ", ".join(quote_value(v) for v in record.sorted_values)
    return f"export const {array_name} = [{values}] as const"


def to_array_name(name: str) -> str:
    """
    Convert an enum name into its array identifier.

    The first letter is lower-cased, then a trailing Status/Type/Model/Role/
    Source/Mode is pluralized ("orderStatus" -> "orderStatuses"). Anything
    else gets a "Values" suffix.
    """
    camel_case = lower_first(name)

    for suffix, plural in PLURAL_SUFFIXES.items():
        if camel_case.endswith(suffix):
            return camel_case[: -len(suffix)] + plural

    return f"{camel_case}{VALUES_SUFFIX}"


def quote_value(value: str) -> str:
    return "'" + _UNESCAPED_QUOTE.sub(r"\\'", value) + "'"
