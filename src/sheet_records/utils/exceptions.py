"""Centralized exception classes for sheet-records.

This module provides a hierarchy of custom exceptions with error codes and
structured error details for consistent error handling across the readers.

Exception Hierarchy:
    SheetRecordsError (base)
    ├── FileError
    │   ├── WorkbookNotFoundError
    │   ├── FileTooLargeError
    │   ├── WorkbookReadError
    │   └── WorkbookFormatError
    ├── SheetError
    │   └── SheetNotFoundError
    └── ReadError
        └── InvalidHeaderRowError

Cell-level resolution never raises; everything here is raised while opening
a workbook or locating a sheet.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Enumeration of all error codes used by the package.

    Error codes are grouped by category:
    - E1xxx: File/workbook errors
    - E2xxx: Sheet lookup errors
    - E3xxx: Read parameter errors
    - E9xxx: Internal/unexpected errors
    """

    # File errors (E1xxx)
    FILE_NOT_FOUND = "E1001"
    FILE_TOO_LARGE = "E1002"
    FILE_READ_ERROR = "E1003"
    INVALID_WORKBOOK_FORMAT = "E1004"

    # Sheet errors (E2xxx)
    SHEET_NOT_FOUND = "E2001"

    # Read errors (E3xxx)
    INVALID_HEADER_ROW = "E3001"

    # Internal errors (E9xxx)
    INTERNAL_ERROR = "E9001"


class SheetRecordsError(Exception):
    """Base exception for all sheet-records errors.

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code from ErrorCode enum.
        details: Optional dictionary with additional error details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Error code from ErrorCode enum.
            details: Optional additional details about the error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary.

        Returns:
            Dictionary with error information.
        """
        result: dict[str, Any] = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code.value}] {self.message}"


# =============================================================================
# File Errors (E1xxx)
# =============================================================================


class FileError(SheetRecordsError):
    """Base class for workbook file errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.FILE_READ_ERROR,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with file path information.

        Args:
            message: Error message.
            error_code: Error code.
            file_path: Path to the problematic file.
            details: Additional details.
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, error_code, details)
        self.file_path = file_path


class WorkbookNotFoundError(FileError):
    """Raised when the workbook file does not exist."""

    def __init__(
        self,
        file_path: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = message or f"Workbook not found: {file_path}"
        super().__init__(
            message=message,
            error_code=ErrorCode.FILE_NOT_FOUND,
            file_path=file_path,
            details=details,
        )


class FileTooLargeError(FileError):
    """Raised when a workbook exceeds the configured size limit."""

    def __init__(
        self,
        file_size: int,
        max_size: int,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with size information.

        Args:
            file_size: Actual file size in bytes.
            max_size: Maximum allowed size in bytes.
            file_path: Optional file path.
            details: Additional details.
        """
        details = details or {}
        details["file_size_bytes"] = file_size
        details["max_size_bytes"] = max_size
        message = (
            f"File size ({file_size} bytes) exceeds maximum "
            f"allowed size ({max_size} bytes)"
        )
        super().__init__(
            message=message,
            error_code=ErrorCode.FILE_TOO_LARGE,
            file_path=file_path,
            details=details,
        )
        self.file_size = file_size
        self.max_size = max_size


class WorkbookReadError(FileError):
    """Raised when the workbook file exists but cannot be read."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=ErrorCode.FILE_READ_ERROR,
            file_path=file_path,
            details=details,
        )


class WorkbookFormatError(FileError):
    """Raised when the file is not a parsable workbook container."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_WORKBOOK_FORMAT,
            file_path=file_path,
            details=details,
        )


# =============================================================================
# Sheet Errors (E2xxx)
# =============================================================================


class SheetError(SheetRecordsError):
    """Base class for sheet lookup errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.SHEET_NOT_FOUND,
        sheet_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if sheet_name is not None:
            details["sheet_name"] = sheet_name
        super().__init__(message, error_code, details)
        self.sheet_name = sheet_name


class SheetNotFoundError(SheetError):
    """Raised when a requested sheet name is absent from the workbook."""

    def __init__(
        self,
        sheet_name: str,
        available: list[str] | None = None,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the missing sheet name.

        Args:
            sheet_name: The sheet name that was requested.
            available: Sheet names the workbook does contain.
            message: Optional custom message.
            details: Additional details.
        """
        details = details or {}
        if available is not None:
            details["available_sheets"] = available
        message = message or f"Sheet '{sheet_name}' not found in workbook"
        super().__init__(
            message=message,
            error_code=ErrorCode.SHEET_NOT_FOUND,
            sheet_name=sheet_name,
            details=details,
        )
        self.available = available or []


# =============================================================================
# Read Errors (E3xxx)
# =============================================================================


class ReadError(SheetRecordsError):
    """Base class for invalid read parameters."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class InvalidHeaderRowError(ReadError):
    """Raised when the header row number is not a positive 1-based index."""

    def __init__(
        self,
        header_row: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["header_row"] = header_row
        super().__init__(
            message=f"Header row must be 1 or greater, got {header_row}",
            error_code=ErrorCode.INVALID_HEADER_ROW,
            details=details,
        )
        self.header_row = header_row
