"""
Unit tests for the document -> DataFrame transform (csv_combinators.transforms.frame).
"""

from __future__ import annotations

import pytest

from csv_combinators.transforms.frame import default_column_names, document_to_frame


class TestDocumentToFrame:
    """Tests for document_to_frame()."""

    def test_header_names_columns(self):
        df = document_to_frame([["title", "year"], ["Hyperion", "1989"]])
        assert list(df.columns) == ["title", "year"]
        assert df.to_dict("records") == [{"title": "Hyperion", "year": "1989"}]

    def test_cells_stay_strings(self):
        df = document_to_frame([["n"], ["1"], ["2"]])
        assert df["n"].dtype == object
        assert df["n"].tolist() == ["1", "2"]

    def test_without_header(self):
        df = document_to_frame([["a", "b"], ["c", "d"]], header=False)
        assert list(df.columns) == ["column_1", "column_2"]
        assert len(df) == 2

    def test_header_only_document(self):
        df = document_to_frame([["title", "author"]])
        assert list(df.columns) == ["title", "author"]
        assert df.empty

    def test_empty_document_rejected(self):
        with pytest.raises(ValueError, match="empty document"):
            document_to_frame([])

    def test_ragged_document_rejected(self):
        with pytest.raises(ValueError, match="same number of fields"):
            document_to_frame([["a", "b"], ["c"]])


def test_default_column_names():
    assert default_column_names(3) == ["column_1", "column_2", "column_3"]
    assert default_column_names(0) == []
