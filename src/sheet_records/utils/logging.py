"""Structured logging utilities for sheet-records.

This module provides:
- Workbook/sheet tracking using contextvars so every log line from a read
  carries the file and sheet it concerns
- Structured logging with consistent ``message | key=value`` format
- Timing helpers for sheet reads

Usage:
    from sheet_records.utils.logging import get_logger, LogContext

    logger = get_logger(__name__)

    with LogContext(workbook="people.xlsx", sheet="Sheet1"):
        logger.info("Reading sheet", header_row=1)

    with timed_operation(logger, "read_sheet") as metrics:
        metrics.rows_read = 10
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from sheet_records.config import settings

_workbook_var: ContextVar[str | None] = ContextVar("workbook", default=None)
_sheet_var: ContextVar[str | None] = ContextVar("sheet", default=None)
_extra_context_var: ContextVar[dict[str, Any] | None] = ContextVar(
    "extra_context", default=None
)


def get_workbook() -> str | None:
    """Get the workbook currently being read, if any."""
    return _workbook_var.get()


def set_workbook(workbook: str | None) -> None:
    """Set the workbook in context.

    Args:
        workbook: Workbook path or label, or None to clear.
    """
    _workbook_var.set(workbook)


def get_sheet() -> str | None:
    """Get the sheet currently being read, if any."""
    return _sheet_var.get()


def set_sheet(sheet: str | None) -> None:
    """Set the sheet name in context.

    Args:
        sheet: Sheet name, or None to clear.
    """
    _sheet_var.set(sheet)


def get_extra_context() -> dict[str, Any]:
    """Get additional context from context vars.

    Returns:
        Dictionary of extra context values.
    """
    ctx = _extra_context_var.get()
    return ctx if ctx is not None else {}


def set_extra_context(context: dict[str, Any]) -> None:
    """Set additional context in context vars."""
    _extra_context_var.set(context)


def clear_context() -> None:
    """Clear all context variables."""
    _workbook_var.set(None)
    _sheet_var.set(None)
    _extra_context_var.set(None)


@dataclass
class PerformanceMetrics:
    """Container for metrics gathered during a read.

    Attributes:
        operation: Name of the operation being measured.
        start_time: When the operation started.
        end_time: When the operation ended.
        duration_seconds: Duration in seconds.
        rows_read: Number of sheet rows read (header included).
        records_built: Number of records produced.
    """

    operation: str
    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_time: datetime | None = None
    duration_seconds: float = 0.0
    rows_read: int = 0
    records_built: int = 0

    def finish(self) -> None:
        """Mark the operation as complete and calculate duration."""
        self.end_time = datetime.now(UTC)
        self.duration_seconds = (self.end_time - self.start_time).total_seconds()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging.

        Zero counters are left out.
        """
        result: dict[str, Any] = {
            "operation": self.operation,
            "duration_seconds": self.duration_seconds,
        }
        if self.rows_read > 0:
            result["rows_read"] = self.rows_read
        if self.records_built > 0:
            result["records_built"] = self.records_built
        return result


class StructuredLogFormatter(logging.Formatter):
    """Log formatter that prefixes messages with the workbook/sheet context."""

    def format(self, record: logging.LogRecord) -> str:
        prefix_parts = []
        workbook = get_workbook()
        if workbook:
            prefix_parts.append(f"workbook={workbook}")
        sheet = get_sheet()
        if sheet:
            prefix_parts.append(f"sheet={sheet}")
        for key, value in get_extra_context().items():
            prefix_parts.append(f"{key}={value}")

        prefix = f"[{' '.join(prefix_parts)}] " if prefix_parts else ""

        original_msg = record.msg
        record.msg = f"{prefix}{original_msg}"
        result = super().format(record)
        record.msg = original_msg

        return result


class StructuredLogger:
    """Thin wrapper over a standard logger that appends key=value pairs."""

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)
        self._name = name

    @property
    def logger(self) -> logging.Logger:
        """Access the underlying Python logger."""
        return self._logger

    def _build_message(self, message: str, **kwargs: Any) -> str:
        """Build a message with structured key-value pairs.

        Args:
            message: Base message.
            **kwargs: Additional key-value pairs to include.

        Returns:
            Formatted message string.
        """
        if not kwargs:
            return message

        parts = [f"{k}={v}" for k, v in kwargs.items()]
        return f"{message} | {', '.join(parts)}"

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._build_message(message, **kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._build_message(message, **kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._build_message(message, **kwargs))

    def error(self, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.error(self._build_message(message, **kwargs), exc_info=exc_info)

    def log_performance(self, metrics: PerformanceMetrics) -> None:
        """Log performance metrics.

        Args:
            metrics: Performance metrics to log.
        """
        self.info(
            f"Performance: {metrics.operation}",
            **metrics.to_dict(),
        )


class LogContext:
    """Context manager for adding temporary context to logs.

    Usage:
        with LogContext(workbook="book.xlsx", sheet="Sheet1", header_row=2):
            logger.info("Reading...")  # prefixed with all three values
    """

    def __init__(self, **kwargs: Any) -> None:
        self._new_context = kwargs
        self._old_context: dict[str, Any] = {}
        self._old_workbook: str | None = None
        self._old_sheet: str | None = None

    def __enter__(self) -> "LogContext":
        self._old_context = get_extra_context().copy()
        self._old_workbook = get_workbook()
        self._old_sheet = get_sheet()

        new_context = dict(self._new_context)
        workbook = new_context.pop("workbook", None)
        sheet = new_context.pop("sheet", None)

        if workbook is not None:
            set_workbook(str(workbook))
        if sheet is not None:
            set_sheet(str(sheet))

        merged = self._old_context.copy()
        merged.update(new_context)
        set_extra_context(merged)

        return self

    def __exit__(self, *args: Any) -> None:
        set_extra_context(self._old_context)
        set_workbook(self._old_workbook)
        set_sheet(self._old_sheet)


@contextmanager
def timed_operation(
    logger: StructuredLogger,
    operation: str,
) -> Generator[PerformanceMetrics, None, None]:
    """Context manager for timing operations.

    Usage:
        with timed_operation(logger, "read_sheet") as metrics:
            metrics.records_built = len(records)

        # Logs: "Performance: read_sheet | operation=read_sheet, duration_seconds=..."

    Args:
        logger: Logger to use for output.
        operation: Name of the operation.

    Yields:
        PerformanceMetrics instance for tracking.
    """
    metrics = PerformanceMetrics(operation=operation)
    try:
        yield metrics
    finally:
        metrics.finish()
        logger.log_performance(metrics)


def configure_logging(
    level: int | str | None = None,
    format_string: str | None = None,
    use_structured_formatter: bool = True,
) -> None:
    """Configure root logging for an application embedding the readers.

    Args:
        level: Log level (int or string like "INFO"). Defaults to
            ``settings.log_level``, or DEBUG when ``settings.debug`` is set.
        format_string: Custom format string (uses default if None).
        use_structured_formatter: Whether to prefix workbook/sheet context.
    """
    if level is None:
        level = logging.DEBUG if settings.debug else settings.log_level_int
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)

    formatter: logging.Formatter
    if use_structured_formatter:
        formatter = StructuredLogFormatter(format_string)
    else:
        formatter = logging.Formatter(format_string)

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for a module.

    Example:
        logger = get_logger(__name__)
        logger.info("Opened workbook", sheets=3)
    """
    return StructuredLogger(name)
