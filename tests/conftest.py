from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from openpyxl import Workbook

from sheet_records.memory import InMemoryWorkbook
from sheet_records.utils.logging import clear_context


@pytest.fixture(autouse=True)
def _reset_log_context() -> None:
    clear_context()


@pytest.fixture
def people_workbook() -> InMemoryWorkbook:
    """Workbook with the canonical Name/Age example sheet."""
    return InMemoryWorkbook.from_dict(
        {
            "Sheet1": [
                ["Name", "Age"],
                ["Ann", 30],
                ["Beth", 25.5],
            ],
            "Notes": [["Text"], ["hello"]],
        }
    )


@pytest.fixture
def xlsx_factory(tmp_path: Path) -> Callable[[Workbook, str], Path]:
    """Save an openpyxl workbook into the test's temporary directory."""

    def _save(workbook: Workbook, filename: str = "book.xlsx") -> Path:
        path = tmp_path / filename
        workbook.save(path)
        return path

    return _save


@pytest.fixture
def people_xlsx(xlsx_factory: Callable[[Workbook, str], Path]) -> Path:
    """An .xlsx file mixing strings, numbers, booleans, errors and formulas."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Sheet1"
    ws.append(["Name", "Age", "Active", "Check", "Total"])
    ws.append(["Ann", 30, True, "#N/A", "=B2*2"])
    ws.append(["Beth", 25.5, False, None, "=SUM(B2:B3)"])

    notes = wb.create_sheet("Notes")
    notes["A1"] = "Text"
    notes["A2"] = "hello"
    return xlsx_factory(wb, "people.xlsx")
