"""
enum-arrays CLI Entry Point.

This module implements the command-line interface of the enum-arrays
generator. Point it at the output directory of an OpenAPI TypeScript client
generator: it scans the generated type definitions for string-literal unions
and writes one deduplicated, semantically named constant array per distinct
enumeration to `<output>.ts` in the same directory.

The run operates in three stages:

1.  **Configuration**: Built-in defaults, then `enum-arrays.json` from the
    output directory (or the file given with `--config`), then command-line
    options.
2.  **Generation**: Locates the types file, extracts, names, deduplicates and
    filters the enumerations (`core.pipeline`).
3.  **Output**: Writes the generated file, or prints it with `--stdout`.

Usage:
    Run directly as a script or via the installed entry point.

    $ enum-arrays --path src/client --include Status --array-prefix API_

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal colors and diagnostics.
    - Inquirer: Interactive selection of the types file.
"""

from pathlib import Path
from typing import Annotated

import typer

from constants import CONFIG_FILE_NAME
from core.config import default_config, load_config_file, merge_config
from core.exceptions import ConfigError, FileIOError
from core.handler import print_config_err, print_file_io_err, run_enum_arrays
from ui.observer import NoOpPipelineObserver, RichPipelineObserver
from ui.prompts import select_types_file

app = typer.Typer()


@app.command()
def main(
    path: Annotated[
        Path,
        typer.Option(
            file_okay=False,  # Must be a directory when it exists
            dir_okay=True,
            resolve_path=True,
            help="Output directory of the client generator; holds the types file and receives the enum arrays",
        ),
    ] = Path.cwd(),  # If not provided, use the current working directory
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            dir_okay=False,
            help=f"JSON config file. Defaults to {CONFIG_FILE_NAME} in the output directory",
        ),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option(help="Output file name without the .ts extension"),
    ] = None,
    input_name: Annotated[
        str | None,
        typer.Option("--input", help="Types file name inside the output directory"),
    ] = None,
    include: Annotated[
        list[str] | None,
        typer.Option(help="Keep only enums whose name contains this text (repeatable)"),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(help="Drop enums whose name contains this text (repeatable)"),
    ] = None,
    array_prefix: Annotated[
        str | None,
        typer.Option(help="Prefix prepended to every generated array name"),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Print verbose diagnostics and tracebacks"),
    ] = False,
    interactive: Annotated[
        bool,
        typer.Option(
            "--interactive/--no-interactive",
            help="Offer other .ts files when the types file is missing",
        ),
    ] = False,
    stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print the generated file instead of writing it"),
    ] = False,
):
    """
    Generate deduplicated enum arrays from generated TypeScript types.

    Args:
        path (Path): Output directory of the client generator. Defaults to the
            current working directory.
        config_file (Path | None): Explicit JSON config file.
        output (str | None): Output file name, without extension.
        input_name (str | None): Types file name inside `path`.
        include (list[str] | None): Substring include filters.
        exclude (list[str] | None): Substring exclude filters.
        array_prefix (str | None): Prefix for every emitted identifier.
        debug (bool): Verbose diagnostics. Off leaves the config file value.
        interactive (bool): Prompt for the types file when it is missing.
        stdout (bool): Print instead of writing.

    Raises:
        typer.Exit: With code 1 if configuration fails or no output was generated.
    """
    try:
        settings = build_config(
            path,
            config_file,
            {
                "output": output,
                "input": input_name,
                "includePatterns": include or None,
                "excludePatterns": exclude or None,
                "arrayPrefix": array_prefix,
                "debug": True if debug else None,
            },
        )
    except FileIOError as e:
        print_file_io_err(e)
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_config_err(e)
        raise typer.Exit(code=1) from e

    # Keep stdout clean for piping
    observer = (
        NoOpPipelineObserver()
        if stdout
        else RichPipelineObserver(debug=bool(settings.get("debug")))
    )

    result = run_enum_arrays(
        path,
        settings,
        observer=observer,
        selector=select_types_file if interactive else None,
        write_output=not stdout,
    )

    if result is None:
        raise typer.Exit(code=1)

    if stdout:
        typer.echo(result.content)


def build_config(path: Path, config_file: Path | None, cli_options: dict) -> dict:
    """
    Layer defaults, the config file and command-line options.

    An explicit `--config` file must exist. The implicit one in the output
    directory is optional.

    Raises:
        ConfigError: If the config file is invalid or missing when given explicitly.
        FileReadError: If the config file cannot be read.
    """
    if config_file is not None and not config_file.is_file():
        raise ConfigError(f"Config file not found: {config_file}")

    file_settings = load_config_file(config_file or path / CONFIG_FILE_NAME)

    settings = merge_config(default_config(), file_settings)
    return dict(merge_config(settings, cli_options))


if __name__ == "__main__":
    app()
