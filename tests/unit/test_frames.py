from __future__ import annotations

import numpy as np
import pandas as pd

from tsvtable.io.frames import document_to_frame, frame_to_document
from tsvtable.models.document import Document
from tsvtable.models.row import Row


def test_document_to_frame_without_header():
    doc = Document([["a", 2.5], ["b"]])
    df = document_to_frame(doc)
    assert df.shape == (2, 2)
    assert df.iloc[0].tolist() == ["a", "2,5"]
    assert df.iloc[1].tolist() == ["b", ""]


def test_document_to_frame_with_header():
    doc = Document.from_string("Name\tAge\nMario\t25\nFrank\t45")
    df = document_to_frame(doc, header=True)
    assert list(df.columns) == ["Name", "Age"]
    assert df["Age"].tolist() == ["25", "45"]


def test_document_to_frame_fills_row_gaps():
    doc = Document()
    doc[0] = ["a"]
    doc[2] = ["c"]
    df = document_to_frame(doc)
    assert df[0].tolist() == ["a", "", "c"]


def test_document_to_frame_empty():
    assert document_to_frame(Document()).empty


def test_frame_to_document_maps_scalar_types():
    df = pd.DataFrame(
        {
            "Name": ["Frank", "Mario"],
            "Age": [45, 25],
            "Height": [5.6, np.nan],
            "Active": [True, False],
        }
    )
    doc = frame_to_document(df)
    assert doc[0] == Row(["Name", "Age", "Height", "Active"])
    assert doc[1] == Row(["Frank", 45, 5.6, "True"])
    assert doc[2] == Row(["Mario", 25, "", "False"])
    assert doc.to_string() == "Name\tAge\tHeight\tActive\nFrank\t45\t5,6\tTrue\nMario\t25\t\tFalse"


def test_frame_to_document_without_header():
    df = pd.DataFrame([["x", 1], ["y", 2]])
    doc = frame_to_document(df, header=False)
    assert len(doc) == 2
    assert doc.to_string() == "x\t1\ny\t2"


def test_frame_round_trip_keeps_text():
    doc = Document.from_string("Item\tPrice\nApple\t1,2\nPear\t0,8")
    df = document_to_frame(doc, header=True)
    assert frame_to_document(df) == doc
