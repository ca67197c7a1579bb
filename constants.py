"""
Application-wide constants and pattern definitions.

This module defines the regular expressions, word lists and lookup tables used
by the extraction, naming, deduplication and emission stages, together with
the default file names the generator reads and writes.
"""

import re
from typing import Final, Mapping

from models import EnumArraysConfig


GENERATOR_NAME: Final[str] = "enum-arrays"
HEADER_COMMENT: Final[str] = "// This file is auto-generated by openapi-enum-arrays"

DEFAULT_TYPES_FILE: Final[str] = "types.gen.ts"
DEFAULT_OUTPUT_NAME: Final[str] = "enums"
CONFIG_FILE_NAME: Final[str] = "enum-arrays.json"

DEFAULT_CONFIG: Final[EnumArraysConfig] = {
    "name": GENERATOR_NAME,
    "output": DEFAULT_OUTPUT_NAME,
    "input": DEFAULT_TYPES_FILE,
    "includePatterns": None,
    "excludePatterns": None,
    "arrayPrefix": "",
    "debug": False,
}


# ----------------------------------------------------------------------------
# Extraction patterns
# ----------------------------------------------------------------------------

# Whole-text scan for `type Name = <expression>` (one declaration per line).
STANDALONE_TYPE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:export\s+)?type\s+(\w+)\s*=\s*(.+?)\s*$", re.MULTILINE
)

# Start of a top-level object type. The remainder after "=" or the interface
# name is captured so the caller can tell `type X =` from `type X = 'a' | 'b'`.
TYPE_START_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:export\s+)?(?:declare\s+)?(?:type\s+(\w+)\s*=|interface\s+(\w+)\b[^{]*)(.*)$"
)

# A property line: optional readonly, optionally quoted name, optional "?".
PROPERTY_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""^(?:readonly\s+)?(['"]?)([A-Za-z_$][\w$]*)\1\??\s*:\s*(.*)$"""
)

# Opening of `Array<...>` / `ReadonlyArray<...>`; the body is found by bracket depth.
ARRAY_WRAPPER_START_PATTERN: Final[re.Pattern[str]] = re.compile(r"(?:Readonly)?Array<")

# Exactly one quoted literal with the same quote character on both ends.
QUOTED_LITERAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"""^(['"`])(.+?)\1$""")

QUOTE_CHARS: Final[frozenset[str]] = frozenset({"'", '"', "`"})
COMMENT_PREFIXES: Final[tuple[str, ...]] = ("//", "/*", "*")


# ----------------------------------------------------------------------------
# Naming
# ----------------------------------------------------------------------------

# HTTP-verb prefixed operation types, e.g. `GetV1UsersData`.
HTTP_OPERATION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(Get|Post|Put|Delete|Patch)V\d+.*?([A-Z][a-z]+(?:[A-Z][a-z]*)*)"
)
CAPITALIZED_RUN_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[A-Z][a-z]+(?:[A-Z][a-z]*)*"
)
LEADING_WORD_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([A-Z][a-z]+)")
STANDALONE_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:export\s+)?type\s+(\w+)$"
)

# Words that describe the shape of an operation rather than its domain.
GENERIC_STRUCTURAL_WORDS: Final[frozenset[str]] = frozenset(
    {"Data", "Response", "Request", "Query", "Body", "Params"}
)

FALLBACK_ENUM_NAME: Final[str] = "enum"
VALUES_SUFFIX: Final[str] = "Values"


# ----------------------------------------------------------------------------
# Merging
# ----------------------------------------------------------------------------

MERGE_BASE_SCORE: Final[int] = 50
MERGE_GENERIC_PENALTY: Final[int] = 20
MERGE_CONTEXT_BONUS: Final[int] = 10
MERGE_GENERIC_TERMS: Final[tuple[str, ...]] = (
    "data",
    "response",
    "request",
    "query",
    "body",
    "params",
)
MERGE_CONTEXT_TERMS: Final[tuple[str, ...]] = ("request", "response", "query")
VALUES_KEY_SEPARATOR: Final[str] = "|"


# ----------------------------------------------------------------------------
# Emission
# ----------------------------------------------------------------------------

# Trailing word -> plural replacement, checked in order.
PLURAL_SUFFIXES: Final[Mapping[str, str]] = {
    "Status": "Statuses",
    "Type": "Types",
    "Model": "Models",
    "Role": "Roles",
    "Source": "Sources",
    "Mode": "Modes",
}
