"""sheet-records - read spreadsheet sheets as lists of records."""

from sheet_records.memory import InMemoryWorkbook, MemoryCell
from sheet_records.services import (
    ERROR_MARKER,
    Record,
    list_sheets,
    open_workbook,
    read_row,
    read_sheet,
    read_sheet_as_dataframe,
    read_workbook,
    resolve,
    sheet_headers,
    to_header_key,
)
from sheet_records.utils.exceptions import (
    SheetNotFoundError,
    SheetRecordsError,
    WorkbookFormatError,
    WorkbookNotFoundError,
    WorkbookReadError,
)
from sheet_records.workbook import CellKind, ResolvedValue, Workbook

__all__ = [
    "ERROR_MARKER",
    "CellKind",
    "InMemoryWorkbook",
    "MemoryCell",
    "Record",
    "ResolvedValue",
    "SheetNotFoundError",
    "SheetRecordsError",
    "Workbook",
    "WorkbookFormatError",
    "WorkbookNotFoundError",
    "WorkbookReadError",
    "list_sheets",
    "open_workbook",
    "read_row",
    "read_sheet",
    "read_sheet_as_dataframe",
    "read_workbook",
    "resolve",
    "sheet_headers",
    "to_header_key",
]
__version__ = "0.1.0"
