"""Tests for the in-memory workbook backend."""

from sheet_records.memory import InMemoryWorkbook, MemoryCell, MemoryRow
from sheet_records.workbook import CellKind


class TestMemoryCell:
    def test_kind_inference(self) -> None:
        assert MemoryCell.from_value("x").kind() is CellKind.STRING
        assert MemoryCell.from_value(3).kind() is CellKind.NUMERIC
        assert MemoryCell.from_value(3.5).kind() is CellKind.NUMERIC
        assert MemoryCell.from_value(False).kind() is CellKind.BOOLEAN
        assert MemoryCell.from_value(None).kind() is CellKind.BLANK
        assert MemoryCell.from_value(object()).kind() is CellKind.UNKNOWN

    def test_numbers_are_stored_as_floats(self) -> None:
        assert MemoryCell.from_value(3).numeric_value() == 3.0

    def test_formula_cell(self) -> None:
        cell = MemoryCell.formula_cell("=A1*2", cached=4)

        assert cell.kind() is CellKind.FORMULA
        assert cell.formula_text() == "A1*2"
        assert cell.cached_result_kind() is CellKind.NUMERIC


class TestInMemoryWorkbook:
    def test_from_dict(self) -> None:
        workbook = InMemoryWorkbook.from_dict({"B": [["x"]], "A": []})

        assert workbook.sheet_names() == ["B", "A"]
        assert workbook.sheet("A") is not None
        assert workbook.sheet("C") is None

    def test_none_values_are_absent_cells(self) -> None:
        row = MemoryRow.from_values([None, "a", None])

        assert row.cell(0) is None
        assert row.cell(1) is not None
        assert row.cell(9) is None
        assert row.last_cell_index() == 1

    def test_context_manager(self) -> None:
        with InMemoryWorkbook.from_dict({"S": []}) as workbook:
            assert workbook.sheet_names() == ["S"]
