"""
Configuration models and YAML I/O for csv-combinators conversions.

This module defines the Pydantic models that map 1:1 to a conversion
config file (``csvconfig.yaml``), plus helpers for loading, saving and
auto-generating it.

Key models:
- ConvertConfig: Top-level config (source + table + output).
- SourceConfig: Input file path and text encoding.
- TableConfig: How parsed records become a table (header row, number
  inference, table name).
- OutputConfig: Output directory, format and the ``_meta`` toggle.

Key functions:
- load_config(path) -> ConvertConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(...) -> ConvertConfig: Config for a first run.
- validate_header(config, header): Cross-check the config against the data.

Why Pydantic + YAML:
- Pydantic gives strict validation and clear error messages.
- YAML is human-editable (users tweak the output format, table name, etc.).
- Round-trip fidelity: load -> modify -> save preserves structure.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from csv_combinators.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Source file information."""

    input_path: str = Field(..., description="Path to the CSV file to parse")
    encoding: str = Field(
        "utf-8-sig", description="Text encoding of the source file"
    )


class TableConfig(BaseModel):
    """How parsed records are turned into a table."""

    table_name: str = Field("default", description="Name of the output table")
    header: bool = Field(
        True, description="If True, the first record names the columns"
    )
    infer_numbers: bool = Field(
        True, description="If True, convert all-numeric columns to numbers"
    )

    @field_validator("table_name")
    @classmethod
    def _check_table_name(cls, value: str) -> str:
        """Table names must be usable as file stems and not clash with _meta."""
        if not value.strip():
            raise ValueError("table_name must not be empty")
        if value.startswith("_"):
            raise ValueError(
                f"table_name '{value}' is reserved: names starting with '_' "
                "are used for generated tables such as _meta"
            )
        if "/" in value or "\\" in value:
            raise ValueError(f"table_name '{value}' must not contain path separators")
        return value


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Output format"
    )
    write_meta: bool = Field(
        True, description="If True, write a _meta lineage table next to the data"
    )
    csv_line_terminator: Literal["crlf", "lf"] = Field(
        "crlf", description="Line break used in CSV output"
    )
    csv_encoding: str = Field(
        "utf-8-sig", description="Text encoding of CSV output (BOM by default, for Excel)"
    )


class ConvertConfig(BaseModel):
    """Top-level configuration for a conversion.

    Maps 1:1 to the YAML config file. This is the single source of truth
    for subsequent runs.
    """

    source: SourceConfig
    table: TableConfig = Field(default_factory=TableConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> ConvertConfig:
    """Load and validate a YAML config into a ConvertConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the config file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ConvertConfig.model_validate(raw)


def save_config(config: ConvertConfig, path: str | Path) -> None:
    """Serialize a ConvertConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# csv-combinators conversion config\n")
        f.write("# Edit this file to change the header handling, output format, etc.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(
    input_path: str,
    output_dir: str = "outputs/",
    header: bool = True,
) -> ConvertConfig:
    """Build a ConvertConfig for a first run.

    The table is named after the source file stem when that makes a valid
    table name, otherwise ``default``.
    """
    stem = Path(input_path).stem
    try:
        table = TableConfig(table_name=stem, header=header)
    except ValueError:
        table = TableConfig(header=header)
    return ConvertConfig(
        source=SourceConfig(input_path=input_path),
        table=table,
        output=OutputConfig(output_dir=output_dir),
    )


def validate_header(config: ConvertConfig, header: list[str]) -> None:
    """Cross-validate the header record against the config.

    Column names must be unique when the first record is used as the header:
    Parquet (and most downstream tools) reject duplicate column names.

    Raises:
        ConfigValidationError: If ``header`` is enabled and names repeat.
    """
    if not config.table.header:
        return
    duplicates = sorted(name for name, count in Counter(header).items() if count > 1)
    if duplicates:
        raise ConfigValidationError(
            f"Header of {config.source.input_path} repeats column names: {duplicates}\n"
            "Rename the columns or set 'table.header: false' in the config."
        )
    logger.debug("Header validation passed: %d unique columns", len(header))
