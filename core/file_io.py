import os
from pathlib import Path
from typing import Callable, Protocol

from core.exceptions import FileReadError, FileWriteError, InvalidFilePathError

# Bytes sniffed for NUL when deciding whether a file is text
BINARY_SNIFF_SIZE = 1024


class FileReader(Protocol):
    """
    Protocol for reading a type-definition or config file.

    The filesystem implementation is used in production, the mock one in tests.
    """

    def read_file(self, file_path: Path) -> str:
        """
        Read the text content of a file as UTF-8.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            FileReadError: If the file is missing, binary or cannot be read.
        """


class FileWriter(Protocol):
    """Protocol for writing the generated enum file."""

    file_path: Path | None

    def write_file(self, data: str, mode: str = "w") -> None:
        """
        Write data to a file.

        Args:
            data: String data to write.
            mode: File mode ("w" for write/truncate, "a" for append). Defaults to "w".
        """


class FilesystemFileReader:

    def read_file(self, file_path: Path) -> str:
        """
        Read the text content of a file as UTF-8.

        Invalid UTF-8 sequences are dropped (errors="ignore"). A file that is gone
        by the time it is read, or that looks binary, is an error rather than
        empty input, so no output is generated from it.

        Raises:
            FileReadError: If the file is missing, binary or an I/O error occurs.
        """
        if not file_path.is_file():
            raise FileReadError(
                message=f"File does not exist or is not a regular file: {file_path}",
                file_path=str(file_path),
            )

        try:
            with file_path.open("rb") as f:
                if b"\0" in f.read(BINARY_SNIFF_SIZE):
                    raise FileReadError(
                        message=f"File looks binary, expected TypeScript source: {file_path}",
                        file_path=str(file_path),
                    )
            with file_path.open("r", encoding="utf-8", errors="ignore") as f:
                return f.read()
        except OSError as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e


class FilesystemFileWriter:
    def __init__(self, file_path: Path | None = None):
        self.file_path = file_path

    @classmethod
    def from_path(cls, file_path: Path) -> "FilesystemFileWriter":
        """
        Create a writer instance with an explicit file path.

        Args:
            file_path: The path to the file to manage.

        Returns:
            FilesystemFileWriter instance configured for the given path.

        Raises:
            InvalidFilePathError: If file_path is invalid (e.g., parent directory
                doesn't exist or is not writable).
        """
        parent = file_path.parent
        if not parent.exists():
            raise InvalidFilePathError(
                message=f"Parent directory does not exist: {parent}",
                file_path=str(file_path),
            )
        if not os.access(parent, os.W_OK):
            raise InvalidFilePathError(
                message=f"Parent directory is not writable: {parent}",
                file_path=str(file_path),
            )

        return cls(file_path)

    def write_file(self, data: str, mode: str = "w") -> None:
        """
        Writes data to the output file.

        Args:
            data: String data to write
            mode: File mode ("w" for write/truncate, "a" for append)

        Raises:
            InvalidFilePathError: If file path is not set.
            FileWriteError: If writing to the file fails.
        """
        if self.file_path is None:
            raise InvalidFilePathError("No file path set. Use a factory method first.")

        try:
            with open(self.file_path, mode, encoding="utf-8") as f:
                f.write(data)
        except OSError as e:
            raise FileWriteError(
                message=f"Failed to write to file: {self.file_path}",
                file_path=str(self.file_path),
                original_exception=e,
            ) from e


class MockFileReader:
    """
    Mock implementation of FileReader for testing.

    Returns configurable file contents, allowing tests to control file reading
    behavior without requiring filesystem operations or actual file I/O.
    """

    def __init__(
        self,
        return_value: str | None = None,
        read_file_fn: Callable[[Path], str] | None = None,
    ):
        """
        Initialize MockFileReader with configurable reading behavior.

        Args:
            return_value: If provided, always returns this value regardless of input.
                Takes precedence over read_file_fn if both are provided.
            read_file_fn: Optional callable that takes a file path and returns file content.

        Attributes (for test inspection):
            read_file_calls: List of file paths passed to read_file()
        """
        self.return_value = return_value
        self.read_file_fn = read_file_fn
        self.read_file_calls: list[Path] = []

    def read_file(self, file_path: Path) -> str:
        self.read_file_calls.append(file_path)
        if self.return_value is not None:
            return self.return_value
        if self.read_file_fn is not None:
            return self.read_file_fn(file_path)
        return ""


class MockFileWriter:
    """
    Mock implementation of FileWriter for testing.

    Tracks all write calls and keeps the last written content, allowing tests
    to inspect generated output without touching the filesystem.
    """

    def __init__(self, file_path: Path | None = None):
        self.file_path = file_path
        self.write_file_calls: list[tuple[str, str]] = []
        self.written_data: str = ""

    def write_file(self, data: str, mode: str = "w") -> None:
        self.write_file_calls.append((data, mode))
        if mode == "w":
            self.written_data = data
        else:
            self.written_data += data
