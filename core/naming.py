"""
Semantic naming of extracted enumerations.

Names are derived purely from a record's structural path, falling back to its
values when the path carries nothing usable. Tiers, first match wins:

1. HTTP operation types (`GetV1UsersData.query.role`): the last capitalized
   word run that is not a generic structural word is the domain
   (`usersData`), composed with the trailing field (`usersDataRole`).
2. A leading capitalized word that is not generic (`ApiData.status` ->
   `apiStatus`, or just `api` without a field).
3. Any other dotted path: trailing field + "Values" (`query.type` -> `typeValues`).
4. Standalone declarations (`type OrderStatus` -> `orderStatus`).
5. The first two values (`['active', 'inactive']` -> `actinValues`).

Derivation is total: malformed or missing paths fall through to the next tier.
"""

from collections.abc import Sequence

from constants import (
    CAPITALIZED_RUN_PATTERN,
    FALLBACK_ENUM_NAME,
    GENERIC_STRUCTURAL_WORDS,
    HTTP_OPERATION_PATTERN,
    LEADING_WORD_PATTERN,
    STANDALONE_PATH_PATTERN,
    VALUES_SUFFIX,
)
from core.models import EnumRecord
from utils import capitalize_first, lower_first


def derive_name(values: Sequence[str], path: str | None = None) -> str:
    """
    Derive a first-pass semantic name for an enumeration.

    Args:
        values: The enumeration's literal values, in extraction order.
        path: The structural path the values were found at, if known.

    Returns:
        A camelCase name. Never empty.
    """
    domain = extract_domain(path)
    field = extract_field_name(path)

    if domain and field:
        return f"{domain}{capitalize_first(field)}"

    if domain:
        return domain

    if field:
        return f"{field}{VALUES_SUFFIX}"

    standalone = extract_standalone_name(path)
    if standalone:
        return standalone

    return name_from_values(values)


def name_records(records: Sequence[EnumRecord]) -> list[EnumRecord]:
    """Return copies of `records` carrying their derived names."""
    return [
        EnumRecord(derive_name(r.values, r.original_path), r.values, r.original_path)
        for r in records
    ]


def extract_domain(path: str | None) -> str | None:
    if not path:
        return None

    if HTTP_OPERATION_PATTERN.match(path):
        meaningful = [
            run
            for run in CAPITALIZED_RUN_PATTERN.findall(path)
            if run not in GENERIC_STRUCTURAL_WORDS
        ]
        if meaningful:
            return lower_first(meaningful[-1])

    leading = LEADING_WORD_PATTERN.match(path)
    if leading and leading.group(1) not in GENERIC_STRUCTURAL_WORDS:
        return lower_first(leading.group(1))

    return None


def extract_field_name(path: str | None) -> str | None:
    """The trailing dot-segment of a path, or None for undotted paths."""
    if not path or "." not in path:
        return None
    return path.rsplit(".", 1)[1] or None


def extract_standalone_name(path: str | None) -> str | None:
    if not path:
        return None
    match = STANDALONE_PATH_PATTERN.match(path)
    if not match:
        return None
    return lower_first(match.group(1))


def name_from_values(values: Sequence[str]) -> str:
    prefix = values[0].lower()[:3] if values and values[0] else FALLBACK_ENUM_NAME
    suffix = values[1].lower()[:2] if len(values) > 1 else ""
    return f"{prefix}{suffix}{VALUES_SUFFIX}"


def full_path_name(record: EnumRecord) -> str:
    """
    camelCase rendering of the whole structural path.

    Used as the last-resort name when context qualification cannot separate
    colliding names, e.g. "account.type" -> "accountType".
    """
    cleaned = "".join(
        ch for ch in record.original_path if ch.isascii() and (ch.isalnum() or ch in ". ")
    )
    parts = [p for p in cleaned.replace(" ", ".").split(".") if p]
    if not parts:
        return record.name

    return lower_first(parts[0]) + "".join(capitalize_first(p) for p in parts[1:])
