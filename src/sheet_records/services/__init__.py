"""Services for sheet-records.

This package contains the readers that turn workbook cells into values and
records, and the openpyxl backend for ``.xlsx`` files.
"""

from sheet_records.services.cell_resolver import (
    ERROR_MARKER,
    normalize_number,
    resolve,
)
from sheet_records.services.openpyxl_backend import (
    OpenpyxlWorkbook,
    open_workbook,
    read_workbook,
)
from sheet_records.services.row_reader import read_row, row_length
from sheet_records.services.sheet_reader import (
    Record,
    get_sheet,
    list_sheets,
    read_sheet,
    read_sheet_as_dataframe,
    sheet_headers,
    to_header_key,
)

__all__ = [
    "ERROR_MARKER",
    "OpenpyxlWorkbook",
    "Record",
    "get_sheet",
    "list_sheets",
    "normalize_number",
    "open_workbook",
    "read_row",
    "read_sheet",
    "read_sheet_as_dataframe",
    "read_workbook",
    "resolve",
    "row_length",
    "sheet_headers",
    "to_header_key",
]
