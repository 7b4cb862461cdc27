"""Tests for the structured logging utilities."""

import logging
import time
from unittest.mock import MagicMock, patch

import pytest

from sheet_records.utils.logging import (
    LogContext,
    PerformanceMetrics,
    StructuredLogFormatter,
    clear_context,
    configure_logging,
    get_extra_context,
    get_logger,
    get_sheet,
    get_workbook,
    set_sheet,
    set_workbook,
    timed_operation,
)


class TestContextVariables:
    """Tests for context variable management."""

    def test_defaults(self) -> None:
        assert get_workbook() is None
        assert get_sheet() is None
        assert get_extra_context() == {}

    def test_set_and_clear(self) -> None:
        set_workbook("book.xlsx")
        set_sheet("Sheet1")
        assert get_workbook() == "book.xlsx"
        assert get_sheet() == "Sheet1"

        clear_context()

        assert get_workbook() is None
        assert get_sheet() is None


class TestLogContext:
    def test_sets_and_restores(self) -> None:
        set_sheet("Outer")

        with LogContext(workbook="book.xlsx", sheet="Inner", header_row=2):
            assert get_workbook() == "book.xlsx"
            assert get_sheet() == "Inner"
            assert get_extra_context() == {"header_row": 2}

        assert get_workbook() is None
        assert get_sheet() == "Outer"
        assert get_extra_context() == {}

    def test_reusable(self) -> None:
        context = LogContext(sheet="Data")
        with context:
            pass
        with context:
            assert get_sheet() == "Data"


class TestPerformanceMetrics:
    def test_to_dict_skips_zero_counters(self) -> None:
        metrics = PerformanceMetrics(operation="read_sheet")
        assert metrics.to_dict() == {
            "operation": "read_sheet",
            "duration_seconds": 0.0,
        }

    def test_to_dict_with_counters(self) -> None:
        metrics = PerformanceMetrics(operation="read_sheet")
        metrics.rows_read = 3
        metrics.records_built = 2
        result = metrics.to_dict()

        assert result["rows_read"] == 3
        assert result["records_built"] == 2

    def test_finish_calculates_duration(self) -> None:
        metrics = PerformanceMetrics(operation="op")
        time.sleep(0.01)
        metrics.finish()
        assert metrics.duration_seconds > 0
        assert metrics.end_time is not None


class TestStructuredLogger:
    def test_key_value_message(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("sheet_records.test")
        with caplog.at_level(logging.INFO, logger="sheet_records.test"):
            logger.info("Opened workbook", sheets=2)

        assert "Opened workbook | sheets=2" in caplog.text

    def test_timed_operation_logs_metrics(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = get_logger("sheet_records.test")
        with caplog.at_level(logging.INFO, logger="sheet_records.test"):
            with timed_operation(logger, "read_sheet") as metrics:
                metrics.records_built = 5

        assert "Performance: read_sheet" in caplog.text
        assert "records_built=5" in caplog.text

    def test_error_with_exc_info(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger("sheet_records.test")
        with caplog.at_level(logging.ERROR, logger="sheet_records.test"):
            try:
                raise ValueError("bad zip")
            except ValueError:
                logger.error("Workbook could not be parsed", exc_info=True, error="x")

        record = caplog.records[-1]
        assert record.getMessage() == "Workbook could not be parsed | error=x"
        assert record.exc_info is not None
        assert record.exc_info[0] is ValueError


class TestStructuredLogFormatter:
    def test_prefixes_context(self) -> None:
        formatter = StructuredLogFormatter("%(message)s")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)

        with LogContext(workbook="book.xlsx", sheet="Sheet1"):
            output = formatter.format(record)

        assert output == "[workbook=book.xlsx sheet=Sheet1] hello"
        assert record.msg == "hello"

    def test_no_prefix_without_context(self) -> None:
        formatter = StructuredLogFormatter("%(message)s")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
        assert formatter.format(record) == "hello"


class TestConfigureLogging:
    def test_installs_single_structured_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level
        try:
            configure_logging("debug")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, StructuredLogFormatter)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    @pytest.mark.parametrize(
        ("log_level", "debug", "expected"),
        [
            ("WARNING", False, logging.WARNING),
            ("ERROR", False, logging.ERROR),
            ("WARNING", True, logging.DEBUG),
        ],
    )
    def test_default_level_comes_from_settings(
        self, log_level: str, debug: bool, expected: int
    ) -> None:
        fake_settings = MagicMock(
            log_level=log_level,
            log_level_int=getattr(logging, log_level),
            debug=debug,
        )
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level
        try:
            with patch("sheet_records.utils.logging.settings", fake_settings):
                configure_logging()

            assert root.level == expected
            assert root.handlers[0].level == expected
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
