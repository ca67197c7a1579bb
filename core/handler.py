"""
Host boundary of the generator.

`run_enum_arrays` is what a code generator (or the `enum-arrays` command)
calls once its own output directory has been written: it locates the
type-definition file inside that directory, runs the pipeline over it and
writes `<output>.ts` next to it.

Every failure is reported here and never propagated. Missing environment
(no output directory, no types file) is a warning; anything else is an
error. In both cases the run returns None and nothing is written.
"""

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from rich import print as pr

from constants import DEFAULT_OUTPUT_NAME, DEFAULT_TYPES_FILE
from core.config import merge_config, default_config
from core.exceptions import (
    ConfigError,
    FileIOError,
    OutputPathUnavailableError,
    TypesFileNotFoundError,
)
from core.file_io import FileReader, FileWriter, FilesystemFileReader, FilesystemFileWriter
from core.models import GenerationResult
from core.pipeline import generate_enum_arrays
from ui.observer import NoOpPipelineObserver, PipelineObserver
from utils import console

TypesFileSelector = Callable[[Sequence[str]], str | None]
FileWriterFactory = Callable[[Path], FileWriter]


def run_enum_arrays(
    output_path: str | Path | None,
    config: Mapping[str, Any] | None = None,
    observer: PipelineObserver | None = None,
    file_reader: FileReader | None = None,
    file_writer_factory: FileWriterFactory | None = None,
    selector: TypesFileSelector | None = None,
    write_output: bool = True,
) -> GenerationResult | None:
    """
    Generate enum arrays for the types file found in `output_path`.

    Args:
        output_path: Directory holding the generated type definitions; the
            output file is written there as well.
        config: Settings layered on top of the defaults.
        observer: Receives pipeline diagnostics. Defaults to a no-op.
        file_reader: Reader for the types file. Defaults to FilesystemFileReader.
        file_writer_factory: Builds the writer for the output path. Defaults to
            FilesystemFileWriter.from_path.
        selector: Called with candidate file names when the configured types
            file is missing. Returns the chosen name or None.
        write_output: When False, the content is generated but not written.

    Returns:
        The GenerationResult on success, None if the run was aborted. Never raises.
    """
    debug_enabled = bool(config.get("debug")) if config else False
    try:
        settings = merge_config(default_config(), config or {})
        debug_enabled = bool(settings.get("debug"))
        observer = observer if observer is not None else NoOpPipelineObserver()
        reader = file_reader if file_reader is not None else FilesystemFileReader()
        writer_factory = (
            file_writer_factory
            if file_writer_factory is not None
            else FilesystemFileWriter.from_path
        )

        output_dir = resolve_output_dir(output_path)
        output_file = output_dir / f"{settings.get('output') or DEFAULT_OUTPUT_NAME}.ts"
        types_file = locate_types_file(
            output_dir,
            settings.get("input") or DEFAULT_TYPES_FILE,
            output_file,
            selector,
        )

        content = reader.read_file(types_file)
        result = generate_enum_arrays(content, settings, observer)

        if write_output:
            writer = writer_factory(output_file)
            writer.write_file(result.content, mode="w")
            result.output_path = str(output_file)

        observer.on_generated(result.records, result.output_path)
        return result
    except (OutputPathUnavailableError, TypesFileNotFoundError) as e:
        print_environment_warning(e)
    except FileIOError as e:
        print_file_io_err(e)
    except ConfigError as e:
        print_config_err(e)
    except Exception as e:  # noqa: BLE001
        # The host process keeps running whatever goes wrong in here
        print_unexpected_err(e, debug_enabled)
    return None


def resolve_output_dir(output_path: str | Path | None) -> Path:
    """
    Validate the directory the generator reads from and writes to.

    Raises:
        OutputPathUnavailableError: If no path is given or it is not a directory.
    """
    if not output_path:
        raise OutputPathUnavailableError()

    path = Path(output_path)
    if not path.is_dir():
        raise OutputPathUnavailableError(
            message=f"Output path is not a directory, skipping enum generation: {path}",
            path=str(path),
        )
    return path


def locate_types_file(
    output_dir: Path,
    input_name: str,
    output_file: Path | None = None,
    selector: TypesFileSelector | None = None,
) -> Path:
    """
    Find the type-definition file to scan.

    The configured name is used when it exists. Otherwise the other `.ts` files
    of the directory (never the output file itself) are offered to `selector`.

    Raises:
        TypesFileNotFoundError: If nothing usable was found or selected.
    """
    types_file = output_dir / input_name
    if types_file.is_file():
        return types_file

    candidates = discover_types_files(output_dir, output_file)
    if selector is not None and candidates:
        choice = selector(candidates)
        if choice:
            return output_dir / choice

    raise TypesFileNotFoundError(str(types_file), candidates=candidates)


def discover_types_files(output_dir: Path, output_file: Path | None = None) -> list[str]:
    """Sorted names of the `.ts` files in `output_dir`, excluding `output_file`."""
    excluded = output_file.name if output_file is not None else None
    return sorted(
        p.name for p in output_dir.glob("*.ts") if p.is_file() and p.name != excluded
    )


def print_environment_warning(
    e: OutputPathUnavailableError | TypesFileNotFoundError,
) -> None:
    """
    Report a missing output directory or types file.

    These are conditions of the surrounding environment, so they are shown as
    a warning rather than an error.
    """
    pr(f"[yellow]⚠ Warning:[/yellow] {e.message}")
    if isinstance(e, TypesFileNotFoundError) and e.candidates:
        pr(f"Other type files found: [green]{', '.join(e.candidates)}[/green]")
        pr("\n[yellow]Quick Fix:[/yellow] Pass one of them with --input.")
    if isinstance(e, OutputPathUnavailableError):
        pr(f"Diagnostics: {e.diagnostic_info}")


def print_file_io_err(e: FileIOError) -> None:
    """
    Displays a user-friendly error message for file I/O operation failures.

    Args:
        e (FileIOError): The exception that was raised, containing error details
            and file path information.
    """
    pr("❌ [bold red]File I/O Error[/bold red]")
    pr(f"The generator encountered an error while working with files: {e.message}")
    if e.file_path:
        pr(f"File path: [yellow]{e.file_path}[/yellow]")

    pr("\n[yellow]Quick Fix:[/yellow] Check file permissions and available disk space.")
    if e.original_exception:
        pr(f"\nTechnical details: {e.original_exception}")


def print_config_err(e: ConfigError) -> None:
    pr("❌ [bold red]Configuration Error[/bold red]")
    pr(e.message)
    if e.key:
        pr(f"Key: [yellow]{e.key}[/yellow]")


def print_unexpected_err(e: Exception, show_traceback: bool = False) -> None:
    """
    Report an unexpected failure during parse, merge or emit.

    Args:
        e: The exception that was raised.
        show_traceback: Print the full Rich traceback after the summary.
    """
    pr("❌ [bold red]Error generating enum arrays[/bold red]")
    pr(f"[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {e}")
    if show_traceback:
        console.print_exception()
    else:
        pr("\nRun again with --debug for the full traceback.")
