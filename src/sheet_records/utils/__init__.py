"""Utilities package for sheet-records.

This package provides:
- Centralized exception classes (exceptions.py)
- Structured logging utilities (logging.py)
"""

from sheet_records.utils.exceptions import (
    ErrorCode,
    FileError,
    FileTooLargeError,
    InvalidHeaderRowError,
    ReadError,
    SheetError,
    SheetNotFoundError,
    SheetRecordsError,
    WorkbookFormatError,
    WorkbookNotFoundError,
    WorkbookReadError,
)
from sheet_records.utils.logging import (
    LogContext,
    StructuredLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    # Exceptions
    "ErrorCode",
    "FileError",
    "FileTooLargeError",
    "InvalidHeaderRowError",
    "ReadError",
    "SheetError",
    "SheetNotFoundError",
    "SheetRecordsError",
    "WorkbookFormatError",
    "WorkbookNotFoundError",
    "WorkbookReadError",
    # Logging
    "LogContext",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
