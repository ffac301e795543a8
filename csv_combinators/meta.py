"""
Meta table builder for csv-combinators.

Builds the flat ``_meta`` table written alongside the converted data.
One row per output column.

Purpose:
  The _meta table is DESCRIPTIVE -- it records what the conversion did,
  providing data lineage. This complements the YAML config which is
  PRESCRIPTIVE (records what the user wants).

  Key information captured:
  - Source-level: filename, SHA-256 hash, encoding.
  - Column-level: position, name, resulting dtype, numeric flag.
  - Processing: record count, whether a header row was used, timestamp.
"""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from csv_combinators.config import ConvertConfig
from csv_combinators.transforms.pipeline import PipelineResult

logger = logging.getLogger(__name__)

META_COLUMNS = [
    "table_name", "source_file", "source_hash", "encoding",
    "column_index", "column_name", "dtype", "numeric",
    "record_count", "header", "converted_at",
]


def _compute_file_hash(path: Path) -> str:
    """Compute SHA-256 hash of a file for reproducibility tracking."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def build_meta_table(
    config: ConvertConfig,
    pipeline_result: PipelineResult,
    record_count: int,
) -> pd.DataFrame:
    """Build the flat _meta table.

    Args:
        config: The ConvertConfig used for this run.
        pipeline_result: Output of the transform pipeline.
        record_count: Number of records parsed from the source, header
            record included.

    Returns:
        DataFrame with one row per output column and ``META_COLUMNS`` as
        its columns.
    """
    source_path = Path(config.source.input_path)

    # Synthetic documents in tests have no file on disk to hash.
    try:
        source_hash = _compute_file_hash(source_path)
    except FileNotFoundError:
        logger.warning(
            "Source file not found for hashing: %s (using empty hash)",
            source_path,
        )
        source_hash = ""

    converted_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    frame = pipeline_result.frame
    numeric = set(pipeline_result.numeric_columns)

    rows: list[dict] = []
    for index, name in enumerate(pipeline_result.header):
        rows.append(
            {
                "table_name": config.table.table_name,
                "source_file": source_path.name,
                "source_hash": source_hash,
                "encoding": config.source.encoding,
                "column_index": index,
                "column_name": name,
                "dtype": str(frame.dtypes.iloc[index]),
                "numeric": name in numeric,
                "record_count": record_count,
                "header": config.table.header,
                "converted_at": converted_at,
            }
        )

    logger.info("Built _meta table: %d rows", len(rows))
    return pd.DataFrame(rows, columns=META_COLUMNS)
