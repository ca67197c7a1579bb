"""
Interactive user prompts for the enum-arrays CLI.

When the configured type-definition file is missing from the output
directory, the CLI can offer the other `.ts` files it found there instead of
giving up. The prompt uses `inquirer` with the GreenPassion theme and `rich`
for the surrounding text.

Dependencies:
    - inquirer: Interactive terminal prompts
    - rich: Terminal formatting and colors
"""

from collections.abc import Sequence

import inquirer  # type: ignore
from inquirer.themes import GreenPassion  # type: ignore
from rich import print as pr


def select_types_file(candidates: Sequence[str]) -> str | None:
    """
    Prompts the user to pick the type-definition file to scan.

    Args:
        candidates: File names found in the output directory.

    Returns:
        str | None: The selected file name, or None if there was nothing to
        choose from or the prompt was cancelled.
    """
    if not candidates:
        return None

    pr(
        "\n[bold green]The types file was not found. Which file holds the generated types?[/bold green]"
    )

    questions = [
        inquirer.List(
            "types_file",
            message="Hit [ENTER] to make your selection",
            choices=list(candidates),
        ),
    ]

    answers = inquirer.prompt(questions, theme=GreenPassion())

    if not answers:
        return None

    return answers["types_file"]
