"""
Module for extracting literal-union enumerations from type-definition text.

Two independent scans are run over the same text and their results are
concatenated, standalone declarations first:

- **Standalone scan**: every `type Name = 'a' | 'b'` declaration, matched over
  the whole text. The recorded path is "type Name".
- **Property scan**: a single left-to-right pass over lines that tracks the
  enclosing type and nested object properties, recording every property whose
  value is a union of literals. The recorded path is the dot-joined chain,
  e.g. "GetV1UsersData.query.role".

Records leave this module unnamed (empty `name`); naming is a separate stage.
Lines that are not understood are skipped; extraction never raises on input.
"""

from constants import STANDALONE_TYPE_PATTERN
from core.line_filter import is_inert_line, normalize_line
from core.models import EnumRecord, LineKind
from core.property_detector import detect_line
from core.scope import ScopeTracker
from core.union_extraction import extract_union_values, strip_terminator


def extract_enums(content: str) -> list[EnumRecord]:
    """
    Extract every literal-union enumeration from a type-definition file.

    Args:
        content: The full text of the type-definition file.

    Returns:
        Unnamed records in a stable order: standalone declarations in source
        order, followed by property unions in source order.
    """
    return [*extract_standalone_enums(content), *extract_property_enums(content)]


def extract_standalone_enums(content: str) -> list[EnumRecord]:
    records: list[EnumRecord] = []

    for match in STANDALONE_TYPE_PATTERN.finditer(content):
        type_name, expression = match.group(1), match.group(2)
        values = extract_union_values(strip_terminator(expression))
        if values:
            records.append(EnumRecord("", values, f"type {type_name}"))

    return records


def extract_property_enums(content: str) -> list[EnumRecord]:
    """
    Scan object type bodies line by line for literal-union properties.

    Brace counts of every scanned line feed the scope tracker, including lines
    that are neither a property nor a type start (e.g. a lone `{`), so the
    depth stays in step with the closing braces that follow.
    """
    records: list[EnumRecord] = []
    scope = ScopeTracker()

    for raw_line in content.splitlines():
        line = normalize_line(raw_line)
        if is_inert_line(line):
            continue

        match = detect_line(line)
        opening, closing = line.count("{"), line.count("}")

        if match.kind is LineKind.TYPE_START:
            if match.opens_body and match.name:
                scope.begin_type(match.name, awaiting_body=opening == 0)
                if opening:
                    scope.apply_braces(opening, closing)
            else:
                # Single-line alias, covered by the standalone scan
                scope.reset()
            continue

        if not scope.inside_type:
            continue

        if match.kind is LineKind.NESTED_OBJECT and match.name:
            scope.push(match.name)
        elif match.kind is LineKind.UNION_PROPERTY and match.name:
            records.append(EnumRecord("", match.values, scope.child_path(match.name)))

        scope.apply_braces(opening, closing)

    return records
