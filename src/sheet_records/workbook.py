"""Abstract workbook interface consumed by the readers.

The readers never touch a file-format library directly. A backend provides
concrete ``Workbook``/``Sheet``/``Row``/``Cell`` classes; see
``sheet_records.memory`` for plain Python data and
``sheet_records.services.openpyxl_backend`` for ``.xlsx`` files.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum
from types import TracebackType

ResolvedValue = str | int | float | bool
"""A normalized cell value. Blank cells resolve to the empty string."""


class CellKind(str, Enum):
    """Declared content category of a spreadsheet cell."""

    STRING = "string"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    BLANK = "blank"
    ERROR = "error"
    FORMULA = "formula"
    UNKNOWN = "unknown"


class Cell(ABC):
    """A single cell.

    Typed getters are only meaningful for the matching kind. For a FORMULA
    cell they read the cached result, whose kind is ``cached_result_kind()``.
    """

    @abstractmethod
    def kind(self) -> CellKind:
        """Return the declared kind of this cell."""
        ...

    @abstractmethod
    def string_value(self) -> str: ...

    @abstractmethod
    def numeric_value(self) -> float: ...

    @abstractmethod
    def boolean_value(self) -> bool: ...

    @abstractmethod
    def formula_text(self) -> str:
        """Return the formula source without the leading ``=``."""
        ...

    @abstractmethod
    def cached_result_kind(self) -> CellKind:
        """Return the kind of the value last computed for this formula.

        FORMULA here means the formula was never evaluated.
        """
        ...


class BlankCell(Cell):
    """Stand-in for a cell that is absent from its row."""

    def kind(self) -> CellKind:
        return CellKind.BLANK

    def string_value(self) -> str:
        return ""

    def numeric_value(self) -> float:
        return 0.0

    def boolean_value(self) -> bool:
        return False

    def formula_text(self) -> str:
        return ""

    def cached_result_kind(self) -> CellKind:
        return CellKind.BLANK

    def __repr__(self) -> str:
        return "BlankCell()"


class Row(ABC):
    """An ordered sequence of cells indexed from 0."""

    @abstractmethod
    def cell(self, index: int) -> Cell | None:
        """Return the cell at ``index``, or None when it is absent."""
        ...

    @abstractmethod
    def last_cell_index(self) -> int:
        """Return the index of the last populated cell, or -1 for an empty row."""
        ...


class Sheet(ABC):
    """A named, finite sequence of rows in file order."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def rows(self) -> Iterator[Row]:
        """Iterate rows from the first row of the sheet."""
        ...


class Workbook(ABC):
    """An open container of uniquely named sheets.

    Workbooks are owned by the caller and should be closed after use, either
    explicitly or by using the workbook as a context manager.
    """

    @abstractmethod
    def sheet_names(self) -> list[str]:
        """Return sheet names in the order the workbook declares them."""
        ...

    @abstractmethod
    def sheet(self, name: str) -> Sheet | None:
        """Return the sheet called ``name``, or None when there is none."""
        ...

    def close(self) -> None:
        """Release resources held by the workbook."""

    def __enter__(self) -> Workbook:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
