"""
Error types and classification for minigrep.

Every failure the engine can report is a ``SearchError`` subclass carrying a
category, a severity, and a human readable message that callers are expected to
show verbatim. Nothing here retries: a search run is a one-shot, local
operation, so errors are raised once and surfaced to the caller.

Error Categories:
    - CONFIGURATION: empty query, empty path, invalid result cap
    - FILE_ACCESS: the document does not exist or is not a regular file
    - PERMISSION: the document exists but cannot be opened
    - ENCODING: the document is not valid UTF-8 text
    - UNKNOWN: any other I/O failure

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    SearchError: Base exception class for minigrep errors

Functions:
    classify_read_error: Map an exception raised while reading a document
        onto the minigrep error hierarchy

Example:
    >>> from pathlib import Path
    >>> from minigrep.utils.error_handling import classify_read_error
    >>>
    >>> try:
    ...     Path("missing.txt").read_text(encoding="utf-8")
    ... except OSError as exc:
    ...     error = classify_read_error(Path("missing.txt"), exc)
    >>> error.category
    <ErrorCategory.FILE_ACCESS: 'file_access'>
"""

from __future__ import annotations

import time
from enum import Enum
from pathlib import Path
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    CONFIGURATION = "configuration"
    FILE_ACCESS = "file_access"
    PERMISSION = "permission"
    ENCODING = "encoding"
    UNKNOWN = "unknown"


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()

    def to_dict(self) -> dict[str, Any]:
        """Serializable view used by the JSON output and structured logs."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "file_path": str(self.file_path) if self.file_path else None,
            "suggestions": list(self.suggestions),
            "context": dict(self.context),
        }


class ConfigurationError(SearchError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=suggestions,
            context=context,
        )


class EmptyQueryError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "Query string must not be empty",
            suggestions=["Pass a non-empty search query"],
            context={"field": "query"},
        )


class EmptyFilePathError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "Document path must not be empty",
            suggestions=["Pass the path of the file to search"],
            context={"field": "document_path"},
        )


class InvalidMaxResultsError(ConfigurationError):
    def __init__(self, value: int) -> None:
        super().__init__(
            f"Invalid maximum result count: {value}",
            suggestions=["Use a non-negative integer, or omit the limit"],
            context={"field": "max_results", "value": value},
        )


class DocumentNotFoundError(SearchError):
    """The document path does not resolve to an existing file."""

    def __init__(self, file_path: Path, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            f"File not found: {file_path}",
            category=ErrorCategory.FILE_ACCESS,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=["Check the document path", "Verify the file was not moved"],
            context=context,
        )


class DocumentUnreadableError(SearchError):
    """The document exists but could not be read into memory."""

    def __init__(
        self,
        message: str,
        file_path: Path,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=category,
            severity=ErrorSeverity.HIGH,
            file_path=file_path,
            suggestions=suggestions,
            context=context,
        )


class DocumentPermissionError(DocumentUnreadableError):
    def __init__(self, message: str, file_path: Path) -> None:
        super().__init__(
            message,
            file_path,
            category=ErrorCategory.PERMISSION,
            suggestions=[
                "Check file permissions",
                "Run with appropriate user privileges",
            ],
        )


class DocumentEncodingError(DocumentUnreadableError):
    def __init__(self, message: str, file_path: Path, encoding: str = "utf-8") -> None:
        super().__init__(
            message,
            file_path,
            category=ErrorCategory.ENCODING,
            suggestions=[
                f"Convert the file to {encoding}",
                "Check if file is binary",
            ],
            context={"encoding": encoding},
        )


def classify_read_error(file_path: Path, exception: BaseException) -> SearchError:
    """
    Translate an exception raised while reading a document.

    Errors that are already ``SearchError`` instances pass through unchanged.

    Args:
        file_path: Path of the document being read
        exception: The exception raised by the reader

    Returns:
        The matching ``SearchError`` subclass instance
    """
    if isinstance(exception, SearchError):
        return exception
    if isinstance(exception, FileNotFoundError):
        return DocumentNotFoundError(file_path)
    if isinstance(exception, IsADirectoryError):
        return DocumentUnreadableError(
            f"Cannot read file: {file_path} is a directory",
            file_path,
            category=ErrorCategory.FILE_ACCESS,
        )
    if isinstance(exception, PermissionError):
        return DocumentPermissionError(f"Permission denied: {exception}", file_path)
    if isinstance(exception, UnicodeDecodeError):
        return DocumentEncodingError(
            f"Encoding error while reading {file_path}: {exception}",
            file_path,
            encoding=exception.encoding,
        )
    return DocumentUnreadableError(f"Cannot read file {file_path}: {exception}", file_path)
