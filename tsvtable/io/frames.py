from __future__ import annotations

import numbers
from typing import Any

import pandas as pd

from ..models.cell import Cell
from ..models.document import Document
from ..models.row import Row

"""pandas interop for Documents.

document_to_frame renders every cell through Cell.get_string(), so numeric
cells carry the decimal comma exactly as they would in TSV output. Gaps in the
document become empty strings. frame_to_document goes the other way and maps
pandas scalars onto the Cell constructors.
"""

__all__ = [
    "document_to_frame",
    "frame_to_document",
]


def document_to_frame(doc: Document, header: bool = False) -> pd.DataFrame:
    """Build a string DataFrame from ``doc``.

    Parameters
    ----------
    doc: source document
    header: use row 0 as column names (remaining rows become data)
    """
    if not doc.rows:
        return pd.DataFrame()
    width = max(row.span for row in doc.rows.values())
    records: list[list[str]] = []
    for index in range(max(doc.rows) + 1):
        row = doc.rows.get(index, Row())
        record = []
        for column in range(width):
            cell = row.get(column)
            record.append(cell.get_string() if cell is not None else "")
        records.append(record)

    if header:
        columns = records[0]
        return pd.DataFrame(records[1:], columns=columns, dtype=object)
    return pd.DataFrame(records, dtype=object)


def _to_cell(value: Any) -> Cell:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return Cell("")
    if isinstance(value, bool):
        return Cell(str(value))
    if isinstance(value, numbers.Integral):
        return Cell(int(value))
    if isinstance(value, numbers.Real):
        return Cell(float(value))
    return Cell(str(value))


def frame_to_document(df: pd.DataFrame, header: bool = True) -> Document:
    """Build a Document from ``df``.

    Parameters
    ----------
    df: source DataFrame (index is ignored)
    header: emit the column labels as row 0
    """
    doc = Document()
    if header:
        doc.append(Row(_to_cell(c) for c in df.columns))
    for values in df.itertuples(index=False, name=None):
        doc.append(Row(_to_cell(v) for v in values))
    return doc
