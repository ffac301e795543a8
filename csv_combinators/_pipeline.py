"""
Internal pipeline orchestration for csv-combinators.

Shared by ``init()`` and ``convert()`` in ``__init__.py``: the
transform -> meta -> export sequence for one parsed document.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging

from csv_combinators.config import ConvertConfig
from csv_combinators.export import export_table
from csv_combinators.meta import build_meta_table
from csv_combinators.parsers import Document
from csv_combinators.transforms.pipeline import TransformPipeline

logger = logging.getLogger(__name__)


def run_pipeline_and_export(config: ConvertConfig, document: Document) -> list[str]:
    """Transform a parsed document, build ``_meta``, and export to disk.

    Steps:
      1. Run the transform pipeline (header check -> frame -> numbers).
      2. Build the ``_meta`` DataFrame (if enabled).
      3. Export the table (+ ``_meta``) to disk.

    Returns:
        List of output file paths that were written.
    """
    pipeline_result = TransformPipeline(config).run(document)

    meta_df = None
    if config.output.write_meta:
        meta_df = build_meta_table(config, pipeline_result, record_count=len(document))

    written = export_table(
        config.table.table_name,
        pipeline_result.frame,
        meta_df,
        config.output,
    )

    logger.info("Pipeline complete: wrote %d files", len(written))
    return written
