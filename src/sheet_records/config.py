"""Configuration management for sheet-records.

This module provides centralized configuration using pydantic-settings.
All configuration options can be set via environment variables with the
SHEET_RECORDS_ prefix, or via a .env file in the working directory.

Environment Variables:
    SHEET_RECORDS_DEFAULT_SHEET_NAME: Sheet read when none is named (default: Sheet1)
    SHEET_RECORDS_HEADER_ROW: 1-based header row number (default: 1)
    SHEET_RECORDS_MAX_FILE_SIZE_MB: Largest workbook file accepted (default: 100)
    SHEET_RECORDS_LOG_LEVEL: Logging level (default: INFO)
    SHEET_RECORDS_DEBUG: Enable debug mode (default: false)
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Example .env file:
        SHEET_RECORDS_DEFAULT_SHEET_NAME=Data
        SHEET_RECORDS_HEADER_ROW=2
    """

    model_config = SettingsConfigDict(
        env_prefix="SHEET_RECORDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Reader Defaults
    # =========================================================================

    default_sheet_name: str = "Sheet1"
    """Sheet read by read_sheet when no sheet name is given."""

    header_row: int = 1
    """1-based row holding the field names."""

    # =========================================================================
    # File Settings
    # =========================================================================

    max_file_size_mb: int = 100
    """Maximum workbook size in megabytes accepted by open_workbook."""

    # =========================================================================
    # Logging Settings
    # =========================================================================

    log_level: str = "INFO"
    """Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL."""

    debug: bool = False
    """Enable debug mode with additional logging."""

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("default_sheet_name")
    @classmethod
    def validate_sheet_name(cls, v: str) -> str:
        """Validate the default sheet name is non-empty."""
        if not v.strip():
            raise ValueError("default_sheet_name must be a non-empty string")
        return v

    @field_validator("header_row")
    @classmethod
    def validate_header_row(cls, v: int) -> int:
        """Validate the header row is a 1-based row number."""
        if v < 1:
            raise ValueError(f"header_row must be at least 1, got {v}")
        return v

    @field_validator("max_file_size_mb")
    @classmethod
    def validate_file_size(cls, v: int) -> int:
        """Validate file size is positive and reasonable."""
        if not 1 <= v <= 2048:
            raise ValueError(f"max_file_size_mb must be between 1 and 2048, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return upper_v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024

    @property
    def log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        level: int = getattr(logging, self.log_level)
        return level


settings = Settings()
