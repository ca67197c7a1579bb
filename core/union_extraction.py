"""
Recovery of string-literal values from a single type expression.

An expression such as `'a' | 'b' | null` yields ("a", "b"). Array markers
(`Array<...>`, `ReadonlyArray<...>`) are unwrapped recursively, so
`Array<'x' | 'y'>` yields ("x", "y") as well. Only the first array marker
is unwrapped, so `Array<'a' | 'b'> | Array<'c' | 'd'>` yields ("a", "b").
Anything without at least one quoted literal segment yields an empty tuple,
which callers treat as "not an enumeration".
"""

from constants import ARRAY_WRAPPER_START_PATTERN, QUOTED_LITERAL_PATTERN


def extract_union_values(expression: str) -> tuple[str, ...]:
    """
    Extract the distinct literal values of a union expression.

    Args:
        expression: A type expression with any trailing `;` or `,` already removed.

    Returns:
        The unquoted values in first-seen order, without duplicates.
    """
    inner = unwrap_array(expression)
    if inner is not None:
        return extract_union_values(inner)

    if "|" not in expression:
        return ()

    # dict keeps insertion order and drops repeats
    values: dict[str, None] = {}
    for part in expression.split("|"):
        literal = QUOTED_LITERAL_PATTERN.match(part.strip())
        if literal:
            values.setdefault(literal.group(2))

    return tuple(values)


def unwrap_array(expression: str) -> str | None:
    """
    Body of the first array marker in `expression`, up to its matching `>`.

    Returns None when there is no marker or the marker is never closed.
    """
    start = ARRAY_WRAPPER_START_PATTERN.search(expression)
    if not start:
        return None

    depth = 1
    for index in range(start.end(), len(expression)):
        char = expression[index]
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return expression[start.end() : index]

    return None


def strip_terminator(expression: str) -> str:
    """Drop a trailing statement or member terminator (`;` or `,`)."""
    return expression.strip().rstrip(";,").strip()
