"""In-memory workbook backend built from plain Python values."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from sheet_records.workbook import Cell, CellKind, Row, Sheet, Workbook


@dataclass
class MemoryCell(Cell):
    """A cell holding its kind and raw value.

    For FORMULA cells ``value`` is the cached result and ``cached_kind`` its
    kind.
    """

    cell_kind: CellKind
    value: Any = None
    formula: str | None = None
    cached_kind: CellKind | None = None

    @classmethod
    def from_value(cls, value: Any) -> MemoryCell:
        """Build a cell whose kind is inferred from a Python value."""
        if value is None:
            return cls(CellKind.BLANK)
        if isinstance(value, bool):
            return cls(CellKind.BOOLEAN, value)
        if isinstance(value, (int, float)):
            return cls(CellKind.NUMERIC, float(value))
        if isinstance(value, str):
            return cls(CellKind.STRING, value)
        return cls(CellKind.UNKNOWN, value)

    @classmethod
    def blank(cls) -> MemoryCell:
        return cls(CellKind.BLANK)

    @classmethod
    def error(cls, code: str = "#VALUE!") -> MemoryCell:
        return cls(CellKind.ERROR, code)

    @classmethod
    def formula_cell(
        cls,
        formula: str,
        cached: Any = None,
        cached_kind: CellKind | None = None,
    ) -> MemoryCell:
        """Build a formula cell.

        Without ``cached_kind`` the kind is inferred from ``cached``; a missing
        cached value leaves the formula unevaluated.
        """
        if cached_kind is None:
            if cached is None:
                cached_kind = CellKind.FORMULA
            else:
                cached_kind = cls.from_value(cached).cell_kind
        return cls(
            CellKind.FORMULA,
            cached,
            formula=formula.removeprefix("="),
            cached_kind=cached_kind,
        )

    def kind(self) -> CellKind:
        return self.cell_kind

    def string_value(self) -> str:
        return "" if self.value is None else str(self.value)

    def numeric_value(self) -> float:
        return float(self.value)

    def boolean_value(self) -> bool:
        return bool(self.value)

    def formula_text(self) -> str:
        return self.formula or ""

    def cached_result_kind(self) -> CellKind:
        return self.cached_kind or CellKind.FORMULA


@dataclass
class MemoryRow(Row):
    """A row of cells; ``None`` entries are absent cells."""

    cells: list[Cell | None] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: Sequence[Any]) -> MemoryRow:
        """Build a row from values, keeping Cell instances as given.

        ``None`` becomes an absent cell rather than a blank one.
        """
        cells: list[Cell | None] = []
        for value in values:
            if value is None or isinstance(value, Cell):
                cells.append(value)
            else:
                cells.append(MemoryCell.from_value(value))
        return cls(cells)

    def cell(self, index: int) -> Cell | None:
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return None

    def last_cell_index(self) -> int:
        for index in range(len(self.cells) - 1, -1, -1):
            if self.cells[index] is not None:
                return index
        return -1


@dataclass
class MemorySheet(Sheet):
    """A named list of rows."""

    sheet_name: str
    row_list: list[MemoryRow] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.sheet_name

    def rows(self) -> Iterator[Row]:
        return iter(self.row_list)


@dataclass
class InMemoryWorkbook(Workbook):
    """Workbook holding its sheets in memory, in declaration order.

    Example:
        workbook = InMemoryWorkbook.from_dict(
            {"Sheet1": [["Name", "Age"], ["Ann", 30]]}
        )
    """

    sheets: list[MemorySheet] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Sequence[Sequence[Any]]]
    ) -> InMemoryWorkbook:
        """Build a workbook from a mapping of sheet name to rows of values."""
        return cls(
            [
                MemorySheet(name, [MemoryRow.from_values(row) for row in rows])
                for name, rows in data.items()
            ]
        )

    def sheet_names(self) -> list[str]:
        return [sheet.name for sheet in self.sheets]

    def sheet(self, name: str) -> Sheet | None:
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        return None
