"""
Custom exception classes for the enum-arrays generator.

This module defines application-specific exceptions raised while locating,
reading and writing the files the generator works with, and while loading
its configuration. Recognition failures inside the extraction pipeline are
never raised: unrecognized lines are simply skipped.
"""

import os
from typing import Optional


class FileIOError(Exception):
    """
    Base exception for file I/O errors.

    Attributes:
        message: A human-readable error message describing what went wrong.
        file_path: The path of the file involved, if known.
        original_exception: The underlying exception that caused this error, if any.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or "An error occurred during file I/O operation"
        super().__init__(self.message)
        self.file_path = file_path
        self.original_exception = original_exception


class InvalidFilePathError(FileIOError):
    """Raised when a path cannot be used (missing parent, not writable, unset)."""

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Invalid file path provided",
            file_path=file_path,
            original_exception=original_exception,
        )


class FileReadError(FileIOError):
    """Raised when reading a file fails with an OS-level error."""

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Failed to read file",
            file_path=file_path,
            original_exception=original_exception,
        )


class FileWriteError(FileIOError):
    """Raised when writing the generated output fails."""

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message or "Failed to write file",
            file_path=file_path,
            original_exception=original_exception,
        )


class OutputPathUnavailableError(Exception):
    """
    Raised when no output directory is available to read from and write to.

    This is an environment problem rather than a failure of the generator: the
    caller reports it as a warning and aborts without producing output.

    Attributes:
        message: A human-readable message.
        diagnostic_info: The offending path (if any) and the OS name.
    """

    def __init__(self, message: Optional[str] = None, path: Optional[str] = None):
        self.message = (
            message or "Output path not available, skipping enum generation"
        )
        super().__init__(self.message)
        self.diagnostic_info = {
            "path": path or "Not set",
            "os_name": os.name,
        }


class TypesFileNotFoundError(Exception):
    """
    Raised when the type-definition file to scan cannot be found.

    Attributes:
        message: A human-readable message.
        file_path: The path that was expected to hold the type definitions.
        candidates: Other type files found next to it, if any.
    """

    def __init__(
        self,
        file_path: str,
        candidates: Optional[list[str]] = None,
        message: Optional[str] = None,
    ):
        self.message = message or f"Types file not found at {file_path}"
        super().__init__(self.message)
        self.file_path = file_path
        self.candidates = candidates or []


class ConfigError(Exception):
    """
    Raised when the configuration file or an option value is invalid.

    Attributes:
        message: A human-readable message.
        key: The offending configuration key, if the error is tied to one.
    """

    def __init__(self, message: Optional[str] = None, key: Optional[str] = None):
        self.message = message or "Invalid configuration"
        super().__init__(self.message)
        self.key = key
