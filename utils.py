"""
General utility functions for the CLI application.
"""

from rich.console import Console

console: Console = Console()


def debug(
    *values: object,
    sep: str = " ",
    end: str = "\n",
) -> None:
    """
    Print debug message with orange bold formatting.

    This utility function formats and prints debug messages to the console using
    Rich's styling capabilities. It's used by the diagnostic observer when the
    `debug` option is enabled.

    Args:
        *values: Variable number of objects to print. All values are converted to strings.
        sep: Separator string between values. Defaults to a single space.
        end: String appended after the last value. Defaults to newline.
    """
    if not values:
        console.print(end=end)
        return

    message = sep.join(str(v) for v in values)

    # markup=False: enum values may contain square brackets
    console.print(f"DEBUG: {message}", end=end, style="orange1", markup=False)


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def lower_first(text: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return text[:1].lower() + text[1:]
