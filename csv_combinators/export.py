"""
Exporter for csv-combinators.

Writes the converted table, and optionally the ``_meta`` table, to the
output directory in the configured format.

Output file naming convention:
  {table_name}.{format}  -- e.g., "books.parquet", "books.csv"
  "_meta.{format}"       -- written alongside the table when enabled.

Parquet keeps the inferred dtypes. CSV output goes through this package's
own RFC4180 writer (``writer.format_document``), so whatever the exporter
writes parses back with ``parse_file``. Missing values are written as empty
fields.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from csv_combinators.config import OutputConfig
from csv_combinators.exceptions import ExportError
from csv_combinators.writer import format_document

logger = logging.getLogger(__name__)

LINE_TERMINATORS = {"crlf": "\r\n", "lf": "\n"}


def _cell_text(value: object) -> str:
    if pd.isna(value):
        return ""
    return str(value)


def frame_to_records(df: pd.DataFrame) -> list[list[str]]:
    """Header record followed by one string record per row."""
    records = [[str(col) for col in df.columns]]
    for row in df.itertuples(index=False, name=None):
        records.append([_cell_text(value) for value in row])
    return records


def write_csv(
    df: pd.DataFrame,
    path: Path,
    line_terminator: str = "\r\n",
    encoding: str = "utf-8-sig",
) -> None:
    """Write *df* as an RFC4180 document with a header record."""
    text = format_document(frame_to_records(df), line_terminator=line_terminator)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def _write(df: pd.DataFrame, path: Path, output: OutputConfig) -> None:
    """Write one DataFrame in the configured format.

    Raises:
        ExportError: If the format is unknown or the write fails.
    """
    try:
        if output.output_format == "csv":
            write_csv(
                df,
                path,
                line_terminator=LINE_TERMINATORS[output.csv_line_terminator],
                encoding=output.csv_encoding,
            )
        elif output.output_format == "parquet":
            df.to_parquet(path, index=False, engine="pyarrow")
        else:
            raise ExportError(f"Unsupported output format: '{output.output_format}'")
    except ExportError:
        raise
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output.output_format}: {exc}"
        ) from exc


def export_table(
    table_name: str,
    frame: pd.DataFrame,
    meta_df: pd.DataFrame | None,
    output: OutputConfig,
) -> list[str]:
    """Write the converted table (and ``_meta``) into ``output.output_dir``.

    The directory is created if needed.

    Returns:
        The written paths, the table first, then ``_meta``.

    Raises:
        ExportError: If the format is unsupported or any write fails.
    """
    out = Path(output.output_dir)
    out.mkdir(parents=True, exist_ok=True)
    suffix = output.output_format

    table_path = out / f"{table_name}.{suffix}"
    _write(frame, table_path, output)
    written = [str(table_path)]
    logger.info(
        "Exported table '%s' -> %s (%d rows, %d cols)",
        table_name, table_path.name, len(frame), len(frame.columns),
    )

    if meta_df is not None:
        meta_path = out / f"_meta.{suffix}"
        _write(meta_df, meta_path, output)
        written.append(str(meta_path))
        logger.info("Exported _meta -> %s (%d rows)", meta_path.name, len(meta_df))

    return written
