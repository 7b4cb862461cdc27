"""openpyxl-backed workbooks for ``.xlsx`` files.

openpyxl exposes either formulas or their cached results, never both, so a
file is loaded twice: once with formulas and once with ``data_only=True`` for
the values the authoring application last computed. Formulas are never
evaluated here; a formula without a cached value is reported as unevaluated.

Dates are not typed values: date and time cells read as NUMERIC Excel serial
numbers, as they are stored in the file.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.cell import Cell as OpenpyxlCellType
from openpyxl.utils.datetime import to_excel
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook as OpenpyxlWorkbookType
from openpyxl.worksheet.formula import ArrayFormula
from openpyxl.worksheet.worksheet import Worksheet

from sheet_records.config import settings
from sheet_records.services.sheet_reader import Record, read_sheet
from sheet_records.utils.exceptions import (
    FileTooLargeError,
    WorkbookFormatError,
    WorkbookNotFoundError,
    WorkbookReadError,
)
from sheet_records.utils.logging import LogContext, get_logger
from sheet_records.workbook import Cell, CellKind, Row, Sheet, Workbook

logger = get_logger(__name__)

_STRING_TYPES = {"s", "str", "inlineStr"}
_NUMERIC_TYPES = {"n", "d"}
_TEMPORAL_TYPES = (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)


def _kind_of(data_type: str, value: Any) -> CellKind:
    """Map an openpyxl data type to a cell kind."""
    if data_type == "f":
        return CellKind.FORMULA
    if value is None:
        return CellKind.BLANK
    if data_type in _STRING_TYPES:
        return CellKind.STRING
    if data_type in _NUMERIC_TYPES:
        return CellKind.NUMERIC
    if data_type == "b":
        return CellKind.BOOLEAN
    if data_type == "e":
        return CellKind.ERROR
    return CellKind.UNKNOWN


class OpenpyxlCell(Cell):
    """A cell paired with the same cell from the cached-values load."""

    def __init__(
        self,
        cell: OpenpyxlCellType,
        cached_cell: OpenpyxlCellType,
        epoch: datetime.datetime,
    ) -> None:
        self._cell = cell
        self._cached_cell = cached_cell
        self._epoch = epoch

    def _value(self) -> Any:
        if self._cell.data_type == "f":
            return self._cached_cell.value
        return self._cell.value

    def kind(self) -> CellKind:
        return _kind_of(self._cell.data_type, self._cell.value)

    def string_value(self) -> str:
        value = self._value()
        return "" if value is None else str(value)

    def numeric_value(self) -> float:
        value = self._value()
        if isinstance(value, _TEMPORAL_TYPES):
            return float(to_excel(value, self._epoch))
        return float(value)

    def boolean_value(self) -> bool:
        return bool(self._value())

    def formula_text(self) -> str:
        formula = self._cell.value
        if isinstance(formula, ArrayFormula):
            formula = formula.text
        return str(formula or "").removeprefix("=")

    def cached_result_kind(self) -> CellKind:
        cached = self._cached_cell
        if cached.value is None:
            return CellKind.FORMULA
        return _kind_of(cached.data_type, cached.value)


class OpenpyxlRow(Row):
    def __init__(
        self,
        cells: tuple[OpenpyxlCellType, ...],
        cached_cells: tuple[OpenpyxlCellType, ...],
        epoch: datetime.datetime,
    ) -> None:
        self._cells = cells
        self._cached_cells = cached_cells
        self._epoch = epoch

    def cell(self, index: int) -> Cell | None:
        if 0 <= index < len(self._cells):
            return OpenpyxlCell(
                self._cells[index], self._cached_cells[index], self._epoch
            )
        return None

    def last_cell_index(self) -> int:
        for index in range(len(self._cells) - 1, -1, -1):
            if self._cells[index].value is not None:
                return index
        return -1


class OpenpyxlSheet(Sheet):
    """A worksheet; chartsheets have no rows."""

    def __init__(
        self,
        worksheet: Any,
        cached_worksheet: Any,
        epoch: datetime.datetime,
    ) -> None:
        self._worksheet = worksheet
        self._cached_worksheet = cached_worksheet
        self._epoch = epoch

    @property
    def name(self) -> str:
        return str(self._worksheet.title)

    def rows(self) -> Iterator[Row]:
        if not isinstance(self._worksheet, Worksheet):
            return
        # Both loads come from the same file; the bounds keep the shapes equal
        max_row = self._worksheet.max_row
        max_col = self._worksheet.max_column
        row_iter = self._worksheet.iter_rows(max_row=max_row, max_col=max_col)
        cached_iter = self._cached_worksheet.iter_rows(
            max_row=max_row, max_col=max_col
        )
        for cells, cached_cells in zip(row_iter, cached_iter, strict=True):
            yield OpenpyxlRow(cells, cached_cells, self._epoch)


class OpenpyxlWorkbook(Workbook):
    """An ``.xlsx`` workbook opened through openpyxl."""

    def __init__(
        self,
        workbook: OpenpyxlWorkbookType,
        cached_workbook: OpenpyxlWorkbookType,
        path: str | None = None,
    ) -> None:
        self._workbook = workbook
        self._cached_workbook = cached_workbook
        self.path = path

    def sheet_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    def sheet(self, name: str) -> Sheet | None:
        if name not in self._workbook.sheetnames:
            return None
        return OpenpyxlSheet(
            self._workbook[name],
            self._cached_workbook[name],
            self._workbook.epoch,
        )

    def close(self) -> None:
        self._workbook.close()
        self._cached_workbook.close()


def open_workbook(path: str | Path) -> OpenpyxlWorkbook:
    """Open an ``.xlsx`` file.

    Args:
        path: Path to the workbook.

    Returns:
        The open workbook. The caller closes it.

    Raises:
        WorkbookNotFoundError: If the file does not exist.
        FileTooLargeError: If the file exceeds ``settings.max_file_size_mb``.
        WorkbookReadError: If the file cannot be read.
        WorkbookFormatError: If the file is not a valid workbook.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise WorkbookNotFoundError(str(file_path))

    file_size = file_path.stat().st_size
    if file_size > settings.max_file_size_bytes:
        raise FileTooLargeError(
            file_size, settings.max_file_size_bytes, file_path=str(file_path)
        )

    with LogContext(workbook=file_path.name):
        try:
            workbook = load_workbook(filename=file_path, data_only=False)
            try:
                cached_workbook = load_workbook(filename=file_path, data_only=True)
            except Exception:
                workbook.close()
                raise
        except (InvalidFileException, BadZipFile, KeyError, ValueError) as exc:
            logger.error(
                "Workbook could not be parsed", exc_info=settings.debug, error=str(exc)
            )
            raise WorkbookFormatError(
                f"Not a readable workbook: {exc}", file_path=str(file_path)
            ) from exc
        except OSError as exc:
            logger.error(
                "Workbook could not be read", exc_info=settings.debug, error=str(exc)
            )
            raise WorkbookReadError(
                f"Cannot read workbook: {exc}", file_path=str(file_path)
            ) from exc

        logger.info(
            "Opened workbook",
            sheets=len(workbook.sheetnames),
            size_bytes=file_size,
        )
    return OpenpyxlWorkbook(workbook, cached_workbook, path=str(file_path))


def read_workbook(
    path: str | Path,
    sheet_name: str | None = None,
    header_row: int | None = None,
) -> list[Record]:
    """Open a workbook file, read one sheet as records and close it."""
    with open_workbook(path) as workbook, LogContext(workbook=Path(path).name):
        return read_sheet(workbook, sheet_name, header_row)
