"""
Transform pipeline orchestrator for csv-combinators.

Runs the configured sequence of transform steps on a parsed document:

1. **Header check**: When ``table.header`` is on, the first record must name
   every column exactly once.
2. **Frame**: Lay the records out as a string-typed DataFrame.
3. **Numbers**: Convert all-numeric columns (skipped when
   ``table.infer_numbers`` is off).

Returns a ``PipelineResult`` with the table and the facts the ``_meta``
table builder needs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pandas as pd

from csv_combinators.config import ConvertConfig, validate_header
from csv_combinators.parsers import Document
from csv_combinators.transforms.frame import document_to_frame
from csv_combinators.transforms.numbers import parse_numbers

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Output of the transform pipeline.

    Attributes:
        frame: The typed table.
        header: Column names, in order.
        numeric_columns: Columns converted to a numeric dtype.
            Empty if ``infer_numbers`` was disabled.
    """

    frame: pd.DataFrame
    header: list[str] = field(default_factory=list)
    numeric_columns: list[str] = field(default_factory=list)


class TransformPipeline:
    """Orchestrates the sequence of transforms.

    The pipeline is **stateless** -- each call to ``run()`` processes a
    fresh document independently.
    """

    def __init__(self, config: ConvertConfig) -> None:
        self.config = config

    def run(self, document: Document) -> PipelineResult:
        """Run all transforms on *document*.

        Raises:
            ConfigValidationError: If the header repeats a column name.
        """
        table = self.config.table

        # -- Step 1: Header check -----------------------------------------
        if table.header:
            logger.info("Step 1/3: Validating header (%d columns)", len(document[0]))
            validate_header(self.config, document[0])
        else:
            logger.info("Step 1/3: Header check SKIPPED (no header row)")

        # -- Step 2: Frame ------------------------------------------------
        frame = document_to_frame(document, header=table.header)
        logger.info(
            "Step 2/3: Built table '%s' (%d rows x %d cols)",
            table.table_name, len(frame), len(frame.columns),
        )

        # -- Step 3: Number inference (configurable) ----------------------
        numeric_columns: list[str] = []
        if table.infer_numbers:
            frame = parse_numbers(frame)
            numeric_columns = [
                str(col) for col in frame.columns
                if pd.api.types.is_numeric_dtype(frame[col])
            ]
            logger.info("Step 3/3: Inferred %d numeric column(s)", len(numeric_columns))
        else:
            logger.info("Step 3/3: Number inference SKIPPED (disabled in config)")

        return PipelineResult(
            frame=frame,
            header=[str(col) for col in frame.columns],
            numeric_columns=numeric_columns,
        )
