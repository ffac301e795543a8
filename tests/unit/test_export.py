"""
Unit tests for the exporter (csv_combinators.export).

Tests CSV and Parquet export, the CSV output settings, directory creation,
error handling, and reading the output back.
"""

from __future__ import annotations

import pandas as pd
import pytest

from csv_combinators.config import OutputConfig
from csv_combinators.exceptions import ExportError
from csv_combinators.export import export_table, frame_to_records
from csv_combinators.reader import parse_file


def _make_frame() -> pd.DataFrame:
    return pd.DataFrame({
        "title": ["Hyperion", "Pogledaj dom svoj, anđele"],
        "year": [1989, 1929],
        "pages": [482.0, None],
    })


def _make_meta() -> pd.DataFrame:
    return pd.DataFrame({"table_name": ["books"], "column_name": ["title"]})


def _output(tmp_path, **overrides) -> OutputConfig:
    return OutputConfig(output_dir=str(tmp_path), **overrides)


class TestFrameToRecords:
    """Tests for frame_to_records()."""

    def test_header_then_rows(self):
        assert frame_to_records(_make_frame()) == [
            ["title", "year", "pages"],
            ["Hyperion", "1989", "482.0"],
            ["Pogledaj dom svoj, anđele", "1929", ""],
        ]

    def test_empty_frame_keeps_header(self):
        df = pd.DataFrame(columns=["a", "b"])
        assert frame_to_records(df) == [["a", "b"]]


class TestExportCSV:
    """Tests for CSV export."""

    def test_paths(self, tmp_path):
        paths = export_table("books", _make_frame(), _make_meta(), _output(tmp_path, output_format="csv"))
        assert paths == [str(tmp_path / "books.csv"), str(tmp_path / "_meta.csv")]

    def test_output_parses_back(self, tmp_path):
        export_table("books", _make_frame(), None, _output(tmp_path, output_format="csv"))
        assert parse_file(tmp_path / "books.csv") == frame_to_records(_make_frame())

    def test_default_is_crlf_with_bom(self, tmp_path):
        export_table("books", _make_frame(), None, _output(tmp_path, output_format="csv"))
        raw = (tmp_path / "books.csv").read_bytes()
        assert raw.startswith(b"\xef\xbb\xbftitle,year,pages\r\n")
        assert b'"Pogledaj dom svoj, an\xc4\x91ele",1929,\r\n' in raw

    def test_lf_without_bom(self, tmp_path):
        output = _output(
            tmp_path, output_format="csv", csv_line_terminator="lf", csv_encoding="utf-8"
        )
        export_table("books", _make_frame(), None, output)
        raw = (tmp_path / "books.csv").read_bytes()
        assert raw.startswith(b"title,year,pages\n")
        assert b"\r" not in raw

    def test_pandas_reads_output(self, tmp_path):
        export_table("books", _make_frame(), None, _output(tmp_path, output_format="csv"))
        loaded = pd.read_csv(tmp_path / "books.csv", encoding="utf-8-sig")
        assert loaded["title"].tolist() == ["Hyperion", "Pogledaj dom svoj, anđele"]
        assert loaded["year"].tolist() == [1989, 1929]


class TestExportParquet:
    """Tests for Parquet export."""

    def test_parquet_round_trip(self, tmp_path):
        paths = export_table("books", _make_frame(), _make_meta(), _output(tmp_path))
        assert all(p.endswith(".parquet") for p in paths)
        loaded = pd.read_parquet(tmp_path / "books.parquet")
        pd.testing.assert_frame_equal(loaded, _make_frame())

    def test_meta_skipped(self, tmp_path):
        paths = export_table("books", _make_frame(), None, _output(tmp_path))
        assert paths == [str(tmp_path / "books.parquet")]
        assert not (tmp_path / "_meta.parquet").exists()


class TestExportErrors:
    """Tests for export failure modes."""

    def test_creates_nested_directory(self, tmp_path):
        out = tmp_path / "a" / "b"
        export_table("books", _make_frame(), None, _output(out, output_format="csv"))
        assert (out / "books.csv").exists()

    def test_unsupported_format(self, tmp_path):
        output = _output(tmp_path)
        output.output_format = "xlsx"  # assignment is not validated
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_table("books", _make_frame(), None, output)

    def test_write_failure_is_wrapped(self, tmp_path):
        (tmp_path / "books.csv").mkdir()
        with pytest.raises(ExportError, match="Failed to write books.csv"):
            export_table("books", _make_frame(), None, _output(tmp_path, output_format="csv"))
