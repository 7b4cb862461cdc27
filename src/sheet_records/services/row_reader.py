"""Read a row into positionally aligned values."""

from __future__ import annotations

from sheet_records.services.cell_resolver import resolve
from sheet_records.workbook import BlankCell, ResolvedValue, Row

MISSING_CELL = BlankCell()


def row_length(row: Row) -> int:
    """Return the index of the row's last populated cell plus one."""
    return row.last_cell_index() + 1


def read_row(row: Row, column_count: int | None = None) -> list[ResolvedValue]:
    """Resolve the first ``column_count`` cells of ``row``.

    Absent cells are read as blank so value ``i`` always belongs to column
    ``i``. Cells past ``column_count`` are ignored. Without a column count the
    row's own length is used.

    Args:
        row: Row to read.
        column_count: Number of values to return.

    Returns:
        Exactly ``column_count`` resolved values.
    """
    if column_count is None:
        column_count = row_length(row)

    values: list[ResolvedValue] = []
    for index in range(column_count):
        cell = row.cell(index)
        values.append(resolve(cell if cell is not None else MISSING_CELL))
    return values
