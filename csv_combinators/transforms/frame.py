"""
Document -> DataFrame transform for csv-combinators.

The grammar guarantees every record has the same width, so the records can
be laid out as a rectangular table without padding. All cells stay strings
at this point; typing is the job of later steps.

With ``header=True`` the first record names the columns and the remaining
records are the rows. Without a header, columns are named
``column_1 .. column_n``.
"""

from __future__ import annotations

import pandas as pd

from csv_combinators.parsers import Document


def default_column_names(width: int) -> list[str]:
    """Positional column names used when the document has no header."""
    return [f"column_{i}" for i in range(1, width + 1)]


def document_to_frame(document: Document, header: bool = True) -> pd.DataFrame:
    """Lay out parsed records as a string-typed DataFrame.

    Args:
        document: Records as returned by ``parse_document``.
        header: If True, use the first record as column names.

    Returns:
        DataFrame with ``object`` (str) columns. A header-only document gives
        an empty frame that still carries the column names.

    Raises:
        ValueError: If *document* is empty or its records differ in width.
    """
    if not document:
        raise ValueError("Cannot build a table from an empty document")
    width = len(document[0])
    if any(len(record) != width for record in document):
        raise ValueError("All records must have the same number of fields")

    if header:
        columns, rows = list(document[0]), document[1:]
    else:
        columns, rows = default_column_names(width), document

    return pd.DataFrame(rows, columns=columns, dtype=object)
