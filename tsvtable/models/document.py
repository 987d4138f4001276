from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..io.file_store import read_text, write_text
from .cell import Cell, CellValue
from .config_models import DEFAULT_CONFIG, TableConfig
from .row import Row

"""Document model: the in-memory form of a TSV table.

Rows are kept in a dict keyed by row index, with the same sparse semantics as
Row's columns. Parsing and serialization follow the TSV text format:

- field separator: TAB, record separator: LF, no quoting or escaping
- numeric cells are rendered with a decimal comma
- no trailing newline after the last row
"""

__all__ = [
    "Document",
]

FIELD_SEPARATOR = "\t"
RECORD_SEPARATOR = "\n"

logger = logging.getLogger(__name__)

RowInput = Row | Iterable[Cell | CellValue] | Cell | CellValue


def _check_index(index: int) -> None:
    if not isinstance(index, int):
        raise TypeError(f"row index must be int, got {type(index).__name__}")
    if index < 0:
        raise IndexError(f"row index must be non-negative: {index}")


def _as_row(row: RowInput) -> Row:
    if isinstance(row, Row):
        return row.copy()
    return Row(row)


def _split_lines(text: str) -> list[str]:
    # Line-reader semantics: a final LF terminates the last line rather than
    # opening an empty one.
    if not text:
        return []
    lines = text.split(RECORD_SEPARATOR)
    if text.endswith(RECORD_SEPARATOR):
        lines.pop()
    return lines


def _split_fields(line: str) -> list[str]:
    # The segment after the last TAB is always flushed, so an empty line
    # still yields one (empty) field.
    return line.split(FIELD_SEPARATOR)


class Document:
    """Sparse, index-ordered collection of Rows.

    Indexing by int auto-vivifies missing rows. Indexing by str returns the
    first row whose first cell holds that text, falling back to row 0.
    """

    def __init__(self, rows: Iterable[RowInput] = ()) -> None:
        self.rows: dict[int, Row] = {}
        for row in rows:
            self.append(row)

    @classmethod
    def from_string(cls, text: str) -> Document:
        doc = cls()
        doc.load_string(text)
        return doc

    # ---- parsing / serialization -----------------------------------

    def load_string(self, text: str) -> None:
        """Replace the document contents with the rows parsed from ``text``."""
        self.rows.clear()
        for line in _split_lines(text):
            self.append(Row(_split_fields(line)))
        logger.debug(f"loaded {len(self.rows)} rows from text")

    def to_string(self) -> str:
        """Serialize to TSV text. Missing rows and cells render as empty fields."""
        if not self.rows:
            return ""
        lines: list[str] = []
        for index in range(max(self.rows) + 1):
            row = self.rows.get(index)
            if row is None:
                lines.append("")
                continue
            fields = []
            for column in range(row.span):
                cell = row.get(column)
                fields.append(cell.get_string() if cell is not None else "")
            lines.append(FIELD_SEPARATOR.join(fields))
        return RECORD_SEPARATOR.join(lines)

    def load_file(
        self, path: str | Path, config: TableConfig | None = None, strict: bool | None = None
    ) -> None:
        """Load rows from a TSV file.

        When the file cannot be read the document is left unchanged, unless
        strict mode is requested (``strict=True`` or ``config.strict``), in
        which case TsvIOError propagates.
        """
        cfg = config or DEFAULT_CONFIG
        text = read_text(path, encoding=cfg.encoding, strict=cfg.strict if strict is None else strict)
        if text is None:
            return
        self.load_string(text)
        logger.debug(f"loaded {path}")

    def to_file(
        self, path: str | Path, config: TableConfig | None = None, strict: bool | None = None
    ) -> bool:
        """Write ``to_string()`` to ``path``. Returns False on a swallowed failure."""
        cfg = config or DEFAULT_CONFIG
        written = write_text(
            path, self.to_string(), encoding=cfg.encoding, strict=cfg.strict if strict is None else strict
        )
        if written:
            logger.debug(f"saved {len(self.rows)} rows to {path}")
        return written

    # ---- mutation ---------------------------------------------------

    def append(self, row: RowInput) -> None:
        """Insert a copy of ``row`` at index ``len(self)``. A bare value becomes a one-cell row."""
        self.rows[len(self.rows)] = _as_row(row)

    def remove(self, row: Row) -> None:
        """Remove the first row (in index order) structurally equal to ``row``."""
        for index in sorted(self.rows):
            if self.rows[index] == row:
                del self.rows[index]
                return

    def get_or_create(self, index: int) -> Row:
        _check_index(index)
        row = self.rows.get(index)
        if row is None:
            row = self.rows[index] = Row()
        return row

    # ---- lookup -----------------------------------------------------

    def find(self, value: str) -> Row | None:
        """Return the first row whose first cell equals ``value``, or None."""
        for _, row in self.items():
            first = row.get(0)
            text = first.value if first is not None else ""
            if text == value:
                return row
        return None

    def items(self) -> list[tuple[int, Row]]:
        return sorted(self.rows.items())

    # ---- operators --------------------------------------------------

    def __getitem__(self, key: int | str) -> Row:
        if isinstance(key, str):
            row = self.find(key)
            return row if row is not None else self.get_or_create(0)
        return self.get_or_create(key)

    def __setitem__(self, index: int, row: RowInput) -> None:
        _check_index(index)
        self.rows[index] = _as_row(row)

    def __iadd__(self, row: RowInput) -> Document:
        self.append(row)
        return self

    def __isub__(self, row: Row) -> Document:
        self.remove(row)
        return self

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        for _, row in self.items():
            yield row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Document(rows={len(self.rows)})"
