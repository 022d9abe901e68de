"""
Utility functions and helper modules.

- Error types and read-error classification
- Logging configuration
- Output formatting and highlighting
- Line splitting, case folding and document reading
"""

from .error_handling import (
    ConfigurationError,
    DocumentEncodingError,
    DocumentNotFoundError,
    DocumentPermissionError,
    DocumentUnreadableError,
    EmptyFilePathError,
    EmptyQueryError,
    InvalidMaxResultsError,
    SearchError,
    classify_read_error,
)
from .formatter import format_result, format_stats, render_highlight_console
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger
from .utils import fold_case, highlight_spans, read_document, split_lines

__all__ = [
    # Error handling
    "ConfigurationError",
    "DocumentEncodingError",
    "DocumentNotFoundError",
    "DocumentPermissionError",
    "DocumentUnreadableError",
    "EmptyFilePathError",
    "EmptyQueryError",
    "InvalidMaxResultsError",
    "SearchError",
    "classify_read_error",
    # Formatting
    "format_result",
    "format_stats",
    "render_highlight_console",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
    # Utilities
    "fold_case",
    "highlight_spans",
    "read_document",
    "split_lines",
]
