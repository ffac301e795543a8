"""
Unit tests for the _meta table builder (csv_combinators.meta).

Tests build_meta_table() with synthetic configs and pipeline results.
Also tests _compute_file_hash() against a temp file.
"""

from __future__ import annotations

import hashlib

import pandas as pd

from csv_combinators.config import ConvertConfig, SourceConfig, TableConfig
from csv_combinators.meta import META_COLUMNS, _compute_file_hash, build_meta_table
from csv_combinators.transforms.pipeline import PipelineResult


def _make_result() -> PipelineResult:
    frame = pd.DataFrame({"title": ["Hyperion"], "year": [1989]})
    frame["title"] = frame["title"].astype(object)
    return PipelineResult(frame=frame, header=["title", "year"], numeric_columns=["year"])


def _make_config(input_path: str) -> ConvertConfig:
    return ConvertConfig(
        source=SourceConfig(input_path=input_path),
        table=TableConfig(table_name="books"),
    )


class TestComputeFileHash:
    """Tests for _compute_file_hash()."""

    def test_matches_hashlib(self, tmp_path):
        path = tmp_path / "x.csv"
        path.write_bytes(b"a,b\r\n")
        assert _compute_file_hash(path) == hashlib.sha256(b"a,b\r\n").hexdigest()


class TestBuildMetaTable:
    """Tests for build_meta_table()."""

    def test_one_row_per_column(self, tmp_path):
        path = tmp_path / "books.csv"
        path.write_bytes(b"title,year\r\nHyperion,1989\r\n")
        meta = build_meta_table(_make_config(str(path)), _make_result(), record_count=2)

        assert list(meta.columns) == META_COLUMNS
        assert meta["column_name"].tolist() == ["title", "year"]
        assert meta["column_index"].tolist() == [0, 1]
        assert meta["numeric"].tolist() == [False, True]
        assert meta["dtype"].tolist() == ["object", "int64"]
        assert set(meta["table_name"]) == {"books"}
        assert set(meta["source_file"]) == {"books.csv"}
        assert set(meta["record_count"]) == {2}
        assert set(meta["source_hash"]) == {_compute_file_hash(path)}

    def test_missing_source_gives_empty_hash(self, tmp_path):
        config = _make_config(str(tmp_path / "gone.csv"))
        meta = build_meta_table(config, _make_result(), record_count=2)
        assert set(meta["source_hash"]) == {""}
