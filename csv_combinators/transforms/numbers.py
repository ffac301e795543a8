"""
Number inference transform for csv-combinators.

Parsed fields are always strings. This transform converts a column to a
numeric dtype only when the conversion is lossless for every non-empty
cell, so identifier-like text columns (``"SKU-104"``, ``"N/A"``) are never
half-converted into NaN, and zero-padded codes (``"01234"``) keep their
leading zeros.

Rules per column:
1. Strip leading/trailing whitespace.
2. Empty cells are missing values and do not decide the column type.
3. If any cell is a zero-padded number (``"007"``, ``"-01.5"``) or an
   integer too long to survive a float round-trip (16+ digits), the column
   stays text.
4. If every remaining cell parses with ``pd.to_numeric``, the column becomes
   numeric (``int64`` without missing values, ``float64`` otherwise).
5. Otherwise the column is left untouched.
"""

from __future__ import annotations

import logging

import pandas as pd

logger = logging.getLogger(__name__)

_ZERO_PADDED = r"[+-]?0\d"
_LONG_INTEGER = r"[+-]?\d{16,}$"


def _looks_like_text(cells: pd.Series) -> bool:
    """True if converting *cells* to numbers would change what they say."""
    return bool(
        cells.str.match(_ZERO_PADDED).any()
        or cells.str.match(_LONG_INTEGER).any()
    )


def parse_numbers(
    df: pd.DataFrame,
    columns: list[str] | None = None,
) -> pd.DataFrame:
    """Convert all-numeric string columns to numbers.

    Args:
        df: Input DataFrame with string cells (as built by
            ``document_to_frame``).
        columns: Columns to consider. Defaults to every column.

    Returns:
        A copy of *df* with qualifying columns converted.
    """
    df = df.copy()
    if columns is None:
        columns = list(df.columns)

    for col in columns:
        cleaned = df[col].astype(str).str.strip()
        present = cleaned != ""
        if not present.any():
            continue
        if _looks_like_text(cleaned[present]):
            logger.debug("Column %r kept as text (zero-padded or long codes)", col)
            continue
        converted = pd.to_numeric(cleaned.where(present), errors="coerce")
        if converted[present].isna().any():
            continue
        df[col] = converted
        logger.debug("Column %r converted to %s", col, converted.dtype)

    return df
