"""Custom exceptions

Classifies failures of a conversion run so the CLI can map them to exit codes.
"""

from __future__ import annotations


class ConverterError(Exception):
    """Base class for converter errors"""

    exit_code: int = 1


class UsageError(ConverterError):
    """Bad or missing command line arguments"""

    exit_code = 2


class ConversionIOError(ConverterError):
    """Input/output error

    Raised when the input or output file cannot be opened, read or written.
    """

    exit_code = 3

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class FormatError(ConverterError):
    """Malformed record

    Raised for a line without the `:` separator, a payload containing
    characters outside the expected alphabet, or an odd-length hex string.
    """

    exit_code = 4

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        position: int | None = None,
    ) -> None:
        self.line_number = line_number
        self.position = position
        self.reason = message
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)

    def at_line(self, line_number: int) -> FormatError:
        """Return a copy of this error annotated with the input line number"""
        return FormatError(self.reason, line_number=line_number, position=self.position)
