from __future__ import annotations

from collections.abc import Iterable, Iterator

from .cell import Cell, CellValue

"""Row model: a sparse, index-ordered collection of Cells.

Columns are kept in a dict keyed by column index. Keys need not be contiguous;
gaps appear after removals and render as empty fields when serialized.
"""

__all__ = [
    "Row",
]


def _as_values(cells: Iterable[Cell | CellValue] | Cell | CellValue) -> Iterable[Cell | CellValue]:
    # a bare value is one cell, never a sequence of characters
    if isinstance(cells, (Cell, str, int, float)):
        return [cells]
    return cells


def _check_index(index: int) -> None:
    if not isinstance(index, int):
        raise TypeError(f"column index must be int, got {type(index).__name__}")
    if index < 0:
        raise IndexError(f"column index must be non-negative: {index}")


class Row:
    """Ordered, sparse collection of Cells addressed by column index.

    Appending uses the current cell count as the next index, so after a
    removal an append can overwrite an existing higher index.
    """

    def __init__(self, cells: Iterable[Cell | CellValue] | Cell | CellValue = ()) -> None:
        self.columns: dict[int, Cell] = {}
        for cell in _as_values(cells):
            self.append(cell)

    def append(self, cell: Cell | CellValue) -> None:
        self.columns[len(self.columns)] = Cell(cell)

    def assign(self, cells: Iterable[Cell | CellValue] | Cell | CellValue) -> None:
        """Drop every cell, then append ``cells`` re-indexed from 0."""
        self.columns.clear()
        for cell in _as_values(cells):
            self.append(cell)

    def remove(self, value: Cell | CellValue) -> None:
        """Remove the first cell (in index order) equal to ``value``."""
        for index in sorted(self.columns):
            if self.columns[index].equals(value):
                del self.columns[index]
                return

    def get_or_create(self, index: int) -> Cell:
        _check_index(index)
        cell = self.columns.get(index)
        if cell is None:
            cell = self.columns[index] = Cell()
        return cell

    def get(self, index: int, default: Cell | None = None) -> Cell | None:
        return self.columns.get(index, default)

    @property
    def span(self) -> int:
        """Number of fields this row occupies when serialized (at least 1)."""
        if not self.columns:
            return 1
        return max(self.columns) + 1

    def items(self) -> list[tuple[int, Cell]]:
        return sorted(self.columns.items())

    def copy(self) -> Row:
        row = Row()
        row.columns = {index: cell.copy() for index, cell in self.columns.items()}
        return row

    def __getitem__(self, index: int) -> Cell:
        return self.get_or_create(index)

    def __setitem__(self, index: int, value: Cell | CellValue) -> None:
        _check_index(index)
        self.columns[index] = Cell(value)

    def __iadd__(self, cell: Cell | CellValue) -> Row:
        self.append(cell)
        return self

    def __isub__(self, value: Cell | CellValue) -> Row:
        self.remove(value)
        return self

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[Cell]:
        for _, cell in self.items():
            yield cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self.columns == other.columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Row({dict(self.items())!r})"
