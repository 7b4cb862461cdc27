"""Turn a sheet into records keyed by its header row.

The header row supplies the field names. Each header value is normalized to a
key (see ``to_header_key``) and every row below it becomes a ``dict`` from key
to resolved cell value, with exactly as many fields as the header has columns.

Keys are not deduplicated. When two header cells normalize to the same key,
the later column's value overwrites the earlier one in each record.
"""

from __future__ import annotations

import re
from itertools import islice

import pandas as pd

from sheet_records.config import settings
from sheet_records.services.row_reader import read_row, row_length
from sheet_records.utils.exceptions import InvalidHeaderRowError, SheetNotFoundError
from sheet_records.utils.logging import LogContext, get_logger, timed_operation
from sheet_records.workbook import ResolvedValue, Sheet, Workbook

logger = get_logger(__name__)

Record = dict[str, ResolvedValue]

_WHITESPACE_RE = re.compile(r"\s+")


def to_header_key(value: ResolvedValue | None) -> str:
    """Normalize a header value into a record key.

    The value is stringified, trimmed, lower-cased and each whitespace run is
    replaced by a single ``-``. Normalizing a key again returns it unchanged.

    Example:
        >>> to_header_key("  First Name  ")
        'first-name'
    """
    text = "" if value is None else str(value)
    return _WHITESPACE_RE.sub("-", text.strip().lower())


def list_sheets(workbook: Workbook) -> list[str]:
    """Return all sheet names in workbook order."""
    return list(workbook.sheet_names())


def get_sheet(workbook: Workbook, sheet_name: str) -> Sheet:
    """Look up a sheet by name.

    Raises:
        SheetNotFoundError: If the workbook has no sheet called ``sheet_name``.
    """
    sheet = workbook.sheet(sheet_name)
    if sheet is None:
        raise SheetNotFoundError(sheet_name, available=list_sheets(workbook))
    return sheet


def sheet_headers(workbook: Workbook, sheet_name: str) -> list[ResolvedValue]:
    """Return the first row of a sheet as resolved, un-normalized values.

    Raises:
        SheetNotFoundError: If the sheet does not exist.
    """
    sheet = get_sheet(workbook, sheet_name)
    first_row = next(iter(sheet.rows()), None)
    if first_row is None:
        return []
    return read_row(first_row)


def read_sheet(
    workbook: Workbook,
    sheet_name: str | None = None,
    header_row: int | None = None,
) -> list[Record]:
    """Read a sheet as a list of records.

    Args:
        workbook: Open workbook.
        sheet_name: Sheet to read; defaults to ``settings.default_sheet_name``.
        header_row: 1-based row holding the field names; rows above it are
            skipped. Defaults to ``settings.header_row``.

    Returns:
        One record per row below the header, in row order.

    Raises:
        SheetNotFoundError: If the sheet does not exist.
        InvalidHeaderRowError: If ``header_row`` is below 1.
    """
    _, records = _read_keys_and_records(workbook, sheet_name, header_row)
    return records


def read_sheet_as_dataframe(
    workbook: Workbook,
    sheet_name: str | None = None,
    header_row: int | None = None,
) -> pd.DataFrame:
    """Read a sheet into a pandas DataFrame.

    Columns are the distinct header keys in first-seen order; rows are the
    records returned by ``read_sheet``.
    """
    keys, records = _read_keys_and_records(workbook, sheet_name, header_row)
    columns = list(dict.fromkeys(keys))
    return pd.DataFrame(records, columns=columns)


def _read_keys_and_records(
    workbook: Workbook,
    sheet_name: str | None,
    header_row: int | None,
) -> tuple[list[str], list[Record]]:
    sheet_name = sheet_name if sheet_name is not None else settings.default_sheet_name
    header_row = header_row if header_row is not None else settings.header_row
    if header_row < 1:
        raise InvalidHeaderRowError(header_row)

    sheet = get_sheet(workbook, sheet_name)

    with (
        LogContext(sheet=sheet_name),
        timed_operation(logger, "read_sheet") as metrics,
    ):
        rows = islice(sheet.rows(), header_row - 1, None)
        header = next(rows, None)
        if header is None:
            logger.warning("Sheet has no header row", header_row=header_row)
            return [], []

        column_count = row_length(header)
        keys = [to_header_key(value) for value in read_row(header, column_count)]
        metrics.rows_read = 1

        records: list[Record] = []
        for row in rows:
            values = read_row(row, column_count)
            records.append(dict(zip(keys, values)))
            metrics.rows_read += 1

        metrics.records_built = len(records)
        if len(set(keys)) != len(keys):
            logger.debug("Duplicate header keys, later columns win", keys=keys)

    return keys, records
