"""Resolve spreadsheet cells to plain Python values.

Every cell resolves to exactly one value, whatever its kind:

- STRING: the text, unmodified
- NUMERIC: ``int`` when the number is whole, otherwise the ``float``
- BOOLEAN: the boolean
- BLANK: ``""``
- ERROR: ``"#ERROR"`` (the original error code is not kept)
- FORMULA: the cached result resolved by its own kind, or ``"=" + formula``
  when the formula was never evaluated
- anything else: ``""``

Resolution never raises and never mutates the cell.
"""

from __future__ import annotations

import math

from sheet_records.workbook import Cell, CellKind, ResolvedValue

ERROR_MARKER = "#ERROR"
BLANK_VALUE = ""


def resolve(cell: Cell) -> ResolvedValue:
    """Return the normalized value of ``cell``."""
    return _resolve_as(cell, cell.kind())


def _resolve_as(cell: Cell, kind: CellKind) -> ResolvedValue:
    if kind is CellKind.STRING:
        return cell.string_value()
    if kind is CellKind.NUMERIC:
        return normalize_number(cell.numeric_value())
    if kind is CellKind.BOOLEAN:
        return cell.boolean_value()
    if kind is CellKind.BLANK:
        return BLANK_VALUE
    if kind is CellKind.ERROR:
        return ERROR_MARKER
    if kind is CellKind.FORMULA:
        cached_kind = cell.cached_result_kind()
        if cached_kind is CellKind.FORMULA:
            return f"={cell.formula_text()}"
        return _resolve_as(cell, cached_kind)
    return BLANK_VALUE


def normalize_number(value: float) -> int | float:
    """Return ``value`` as an int when it has no fractional part.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    int_part = math.floor(value)
    if value - int_part == 0.0:
        return int_part
    return value
