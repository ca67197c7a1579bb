"""Line normalization for the property scan: trimming and comment detection."""

from constants import COMMENT_PREFIXES


def normalize_line(line: str) -> str:
    return line.strip()


def is_comment_line(line: str) -> bool:
    """
    Whether an already-trimmed line is part of a comment.

    Covers `//` line comments and the `/*`, ` * ` and `*/` lines of block
    (JSDoc) comments, which is how generated type files document properties.
    """
    return line.startswith(COMMENT_PREFIXES)


def is_inert_line(line: str) -> bool:
    """Blank and comment lines carry no structure and are skipped."""
    return not line or is_comment_line(line)
