"""
csv-combinators: a parser-combinator engine and an RFC4180 CSV grammar.

Public API surface:

- ``parse_document(text)`` -- the core entry point. Returns
  ``Success(remaining, records)`` or an ``Error``; never raises for
  malformed input.

- ``parse_text(text)`` / ``parse_file(path)`` -- raising wrappers that
  return the records or raise ``DocumentParseError`` with the line and
  column of the failure.

- ``format_document(records)`` -- the inverse: render records as
  RFC4180 text.

- ``init(...)`` -- First-run conversion workflow. Parses a CSV file,
  generates a YAML config, and optionally writes the table (CSV or
  Parquet) plus a ``_meta`` lineage table.

- ``convert(config_path)`` -- Subsequent-run workflow. Loads the config
  and rebuilds the outputs.

The combinator engine itself lives in ``csv_combinators.parsers``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from csv_combinators._pipeline import run_pipeline_and_export
from csv_combinators.config import (
    ConvertConfig,
    generate_default_config,
    load_config,
    save_config,
)
from csv_combinators.exceptions import (
    ConfigValidationError,
    CsvCombinatorsError,
    DocumentParseError,
    ExportError,
    SourceDecodeError,
)
from csv_combinators.parsers import Document, Error, Record, Success, parse_document
from csv_combinators.reader import parse_file, parse_text
from csv_combinators.writer import format_document

__all__ = [
    "ConfigValidationError",
    "CsvCombinatorsError",
    "Document",
    "DocumentParseError",
    "Error",
    "ExportError",
    "Record",
    "SourceDecodeError",
    "Success",
    "convert",
    "format_document",
    "init",
    "parse_document",
    "parse_file",
    "parse_text",
]

logger = logging.getLogger(__name__)


def init(
    input_path: str,
    output_dir: str = "outputs/",
    config_path: str = "csvconfig.yaml",
    header: bool = True,
    run_immediately: bool = True,
) -> ConvertConfig:
    """First-run entry point: parse, generate config, optionally convert.

    Orchestration:
      1. ``parse_file()`` -> records (fails fast on an invalid document).
      2. ``generate_default_config()`` -> ``ConvertConfig``
      3. ``save_config()`` to *config_path*
      4. If *run_immediately* is True, run the pipeline via
         ``run_pipeline_and_export()``.

    Args:
        input_path: Path to the CSV file.
        output_dir: Directory where output tables will be written.
        config_path: Where to write the generated config.
        header: Whether the first record holds column names.
        run_immediately: If False, only generate the config file and stop.

    Returns:
        The generated ``ConvertConfig``.

    Raises:
        FileNotFoundError: If *input_path* does not exist.
        SourceDecodeError: If the file is not valid in the source encoding.
        DocumentParseError: If the file is not a valid document.
    """
    logger.info("init() -- input_path=%s, output_dir=%s", input_path, output_dir)

    config = generate_default_config(
        input_path=input_path,
        output_dir=output_dir,
        header=header,
    )
    document = parse_file(input_path, encoding=config.source.encoding)

    save_config(config, config_path)

    if run_immediately:
        logger.info("run_immediately=True -- running pipeline")
        run_pipeline_and_export(config, document)

    return config


def convert(config_path: str | Path = "csvconfig.yaml") -> list[str]:
    """Subsequent-run entry point: load config, parse, rebuild outputs.

    Orchestration:
      1. ``load_config()`` -> ``ConvertConfig`` (Pydantic validation on load).
      2. ``parse_file()`` with the configured encoding.
      3. ``run_pipeline_and_export()`` -- transform, build meta, export.

    Returns:
        List of output file paths that were written.

    Raises:
        FileNotFoundError: If the config or the source file does not exist.
        pydantic.ValidationError: If the config fails validation.
        SourceDecodeError: If the source is not valid in the configured encoding.
        DocumentParseError: If the source is not a valid document.
        ConfigValidationError: If the header repeats a column name.
        ExportError: If writing the outputs fails.
    """
    logger.info("convert() -- config_path=%s", config_path)

    config = load_config(config_path)
    document = parse_file(config.source.input_path, encoding=config.source.encoding)
    return run_pipeline_and_export(config, document)
