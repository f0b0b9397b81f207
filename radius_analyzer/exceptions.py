"""
Custom exceptions for RADIUS session log analysis.

This module defines a hierarchy of exceptions for handling errors
specific to reading the session log, parsing event lines, and
validating run parameters.
"""

from typing import Optional


class RadiusAnalysisError(Exception):
    """Base exception for all RADIUS session analysis errors."""

    pass


class SourceUnavailable(RadiusAnalysisError):
    """Raised when the input log cannot be opened for shared reading.

    This is fatal: the run is aborted and no partial report is produced.

    Attributes:
        file_path: Path to the log that could not be opened.
    """

    def __init__(self, message: str, file_path: Optional[str] = None) -> None:
        self.file_path = file_path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.file_path:
            return f"{base} (file: {self.file_path})"
        return base


class RecordParseError(RadiusAnalysisError):
    """Raised when a single event line cannot be turned into a Record.

    Never escapes the extractor: the line is dropped instead.

    Attributes:
        field: Name of the offending field (if applicable).
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            return f"{base} (field: {self.field})"
        return base


class ConfigurationError(RadiusAnalysisError):
    """Raised for invalid run parameters."""

    pass
