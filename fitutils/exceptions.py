"""
Custom exception classes for fitutils.

Missing or mistyped fields in a source file are never errors; they degrade to
``None``. The classes below cover the failures that do stop work on a file.
"""

from typing import Any, Dict, Optional


class FitUtilsError(Exception):
    """
    Base exception for all fitutils errors.

    All custom exceptions in this package should inherit from this class.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class DecodeError(FitUtilsError):
    """
    Raised when a FIT, GPX or TCX file cannot be read or decoded.

    Examples:
    - File does not exist or cannot be opened
    - Corrupt FIT header or CRC
    - Malformed XML
    """

    def __init__(self, filename: str, reason: Any):
        super().__init__(f"Unable to decode {filename}: {reason}", {"filename": str(filename)})
        self.filename = str(filename)


class UnsupportedFormatError(FitUtilsError):
    """Raised when a file extension is not one of fit, gpx or tcx."""

    def __init__(self, filename: str):
        super().__init__(f"Unsupported file type: {filename}", {"filename": str(filename)})
        self.filename = str(filename)


class ExportError(FitUtilsError):
    """Raised when an output file cannot be written."""

    def __init__(self, path: str, reason: Any):
        super().__init__(f"Unable to write {path}: {reason}", {"path": str(path)})
        self.path = str(path)


class RenameError(FitUtilsError):
    """Raised when renaming or moving a file fails."""

    def __init__(self, source: str, destination: str, reason: Any):
        super().__init__(
            f"Unable to rename {source} to {destination}. Error message: {reason}",
            {"source": str(source), "destination": str(destination)},
        )
        self.source = str(source)
        self.destination = str(destination)


class DurationError(FitUtilsError, ValueError):
    """
    Raised when a duration would be negative or undefined.

    Examples:
    - Negative, NaN or infinite seconds
    - Subtracting a longer duration from a shorter one
    """
    pass
