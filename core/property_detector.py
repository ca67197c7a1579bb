"""
Classification of a single normalized line into one of four shapes.

- TYPE_START: `type Name = ...` or `interface Name {`.
- NESTED_OBJECT: `name: {` where the brace comes before any quote.
- UNION_PROPERTY: `name: 'a' | 'b'`, optionally wrapped in `Array<...>`.
- OTHER: everything else, including scalar and URL-template properties
  such as `url: '/users/{id}'`.
"""

from constants import PROPERTY_PATTERN, QUOTE_CHARS, TYPE_START_PATTERN
from core.models import LineKind, LineMatch
from core.union_extraction import extract_union_values, strip_terminator


def detect_line(line: str) -> LineMatch:
    """
    Recognize the shape of one trimmed, non-comment line.

    Args:
        line: The normalized line.

    Returns:
        A LineMatch describing the line. Never raises; unrecognized input is OTHER.
    """
    type_start = TYPE_START_PATTERN.match(line)
    if type_start:
        name = type_start.group(1) or type_start.group(2)
        remainder = type_start.group(3).strip()
        return LineMatch(
            LineKind.TYPE_START,
            name=name,
            opens_body="{" in remainder or not remainder,
        )

    prop = PROPERTY_PATTERN.match(line)
    if not prop:
        return LineMatch(LineKind.OTHER)

    name, remainder = prop.group(2), prop.group(3)

    if opens_object(remainder):
        return LineMatch(LineKind.NESTED_OBJECT, name=name)

    values = extract_union_values(strip_terminator(remainder))
    if values:
        return LineMatch(LineKind.UNION_PROPERTY, name=name, values=values)

    return LineMatch(LineKind.OTHER)


def opens_object(remainder: str) -> bool:
    """
    Whether a property's type text opens an object body.

    The brace must appear before any quote character; otherwise it belongs to
    a literal value (e.g. a URL template like '/items/{id}').
    """
    brace_index = remainder.find("{")
    if brace_index == -1:
        return False

    quote_indexes = [remainder.find(q) for q in QUOTE_CHARS if q in remainder]
    return not quote_indexes or brace_index < min(quote_indexes)
