"""
Logging setup for minigrep.

A ``SearchLogger`` wraps a named stdlib logger with a stderr handler, an
optional rotating file handler, and a choice of output formats. The engine
reports search start/completion, result truncation and document read failures
through the helpers defined here.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
import time
from enum import Enum
from pathlib import Path
from typing import Any

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }
)


class LogLevel(str, Enum):
    """Available log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Available log formats."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"
    STRUCTURED = "structured"


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_entry.update(_extra_fields(record))
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


class StructuredFormatter(logging.Formatter):
    """Human-readable line followed by ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        record.asctime = self.formatTime(record, self.datefmt)
        base = f"{record.asctime} [{record.levelname}] {record.name}: {record.getMessage()}"

        extra = [f"{key}={value}" for key, value in _extra_fields(record).items()]
        if extra:
            base += f" | {' '.join(extra)}"
        if record.exc_info:
            base += f"\n{self.formatException(record.exc_info)}"
        return base


_SIMPLE_FORMAT = "%(levelname)s: %(message)s"
_DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"


def _make_formatter(format_type: LogFormat) -> logging.Formatter:
    if format_type == LogFormat.JSON:
        return JsonFormatter()
    if format_type == LogFormat.STRUCTURED:
        return StructuredFormatter()
    if format_type == LogFormat.DETAILED:
        return logging.Formatter(_DETAILED_FORMAT)
    return logging.Formatter(_SIMPLE_FORMAT)


class SearchLogger:
    """
    Named minigrep logger with a stderr sink, an optional rotating log file,
    and one of the ``LogFormat`` layouts.

    Building a ``SearchLogger`` for a name that already has one replaces the
    previous handlers. With both sinks disabled the logger gets a
    ``NullHandler`` and stays silent.
    """

    def __init__(
        self,
        name: str = "minigrep",
        level: LogLevel = LogLevel.INFO,
        format_type: LogFormat = LogFormat.SIMPLE,
        log_file: Path | None = None,
        max_file_size: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        enable_console: bool = True,
        enable_file: bool = False,
    ):
        self.name = name
        self.level = level
        self.format_type = format_type
        self.log_file = log_file
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file

        self.logger = logging.getLogger(name)
        self.logger.setLevel(self.numeric_level)
        self.logger.propagate = False

        for stale in list(self.logger.handlers):
            self.logger.removeHandler(stale)
            stale.close()
        for handler in self._build_handlers():
            self.logger.addHandler(handler)

    @property
    def numeric_level(self) -> int:
        return logging.getLevelName(self.level.value)

    def _build_handlers(self) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []
        if self.enable_console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if self.enable_file and self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                logging.handlers.RotatingFileHandler(
                    self.log_file,
                    maxBytes=self.max_file_size,
                    backupCount=self.backup_count,
                    encoding="utf-8",
                )
            )
        for handler in handlers:
            handler.setLevel(self.numeric_level)
            handler.setFormatter(_make_formatter(self.format_type))
        return handlers or [logging.NullHandler()]

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.logger.error(message, extra=kwargs)

    def log_search_start(self, query: str, document_path: str, mode: str, **kwargs: Any) -> None:
        """Log search operation start."""
        self.info(
            f"Starting {mode} search for '{query}' in {document_path}",
            operation="search_start",
            query=query,
            document_path=document_path,
            mode=mode,
            **kwargs,
        )

    def log_search_complete(
        self, query: str, results_count: int, elapsed_ms: float, **kwargs: Any
    ) -> None:
        """Log search operation completion."""
        self.info(
            f"Search completed: query='{query}', results={results_count}, time={elapsed_ms:.2f}ms",
            operation="search_complete",
            query=query,
            results_count=results_count,
            elapsed_ms=elapsed_ms,
            **kwargs,
        )

    def log_truncation(self, total: int, kept: int, **kwargs: Any) -> None:
        self.debug(
            f"Result cap applied: kept {kept} of {total}",
            operation="truncate",
            total=total,
            kept=kept,
            **kwargs,
        )

    def log_document_error(self, document_path: str, error: str, **kwargs: Any) -> None:
        """Log a failure to load the document."""
        self.error(
            f"Document error: {document_path} - {error}",
            operation="document_error",
            document_path=document_path,
            error=error,
            **kwargs,
        )


_global_logger: SearchLogger | None = None


def get_logger() -> SearchLogger:
    """Get the global logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = SearchLogger()
    return _global_logger


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    format_type: LogFormat = LogFormat.SIMPLE,
    log_file: Path | None = None,
    enable_console: bool = True,
    enable_file: bool = False,
    **kwargs: Any,
) -> SearchLogger:
    """Configure global logging settings."""
    global _global_logger
    _global_logger = SearchLogger(
        level=level,
        format_type=format_type,
        log_file=log_file,
        enable_console=enable_console,
        enable_file=enable_file,
        **kwargs,
    )
    return _global_logger


def disable_logging() -> None:
    """Silence the global logger."""
    get_logger().logger.setLevel(logging.CRITICAL + 1)


def enable_debug_logging() -> None:
    """Switch the global logger and its handlers to DEBUG."""
    logger = get_logger()
    logger.level = LogLevel.DEBUG
    logger.logger.setLevel(logging.DEBUG)
    for handler in logger.logger.handlers:
        handler.setLevel(logging.DEBUG)
