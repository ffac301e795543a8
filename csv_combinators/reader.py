"""
Source reading for csv-combinators.

The parser engine works on text that is already in memory. This module is
the thin collaborator in front of it: it reads a file fully, hands the text
to ``parse_document`` once, and turns a returned ``Error`` into a
``DocumentParseError`` for callers that prefer exceptions.

Encoding defaults to ``utf-8-sig`` so that files saved by Excel (with a
BOM) parse the same as plain UTF-8 files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from csv_combinators.exceptions import DocumentParseError, SourceDecodeError
from csv_combinators.parsers import Document, Error, parse_document

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"


def read_text(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a whole file into memory.

    Line endings are preserved (no newline translation), since CRLF is
    part of the grammar.

    Raises:
        FileNotFoundError: If *path* does not exist.
        SourceDecodeError: If the bytes are not valid in *encoding*.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise SourceDecodeError(str(path), encoding, exc) from exc
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def parse_text(text: str, source: str | None = None) -> Document:
    """Parse an in-memory document, raising on failure.

    Args:
        text: The full document text.
        source: Optional name (e.g. a file path) used in error messages.

    Returns:
        The parsed records.

    Raises:
        DocumentParseError: If the text is not a valid document.
    """
    result = parse_document(text)
    if isinstance(result, Error):
        raise DocumentParseError(result, source=source)
    return result.output


def parse_file(path: str | Path, encoding: str = DEFAULT_ENCODING) -> Document:
    """Read and parse a file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        SourceDecodeError: If the file is not valid in *encoding*.
        DocumentParseError: If the file is not a valid document.
    """
    text = read_text(path, encoding=encoding)
    records = parse_text(text, source=str(path))
    logger.info(
        "Parsed %s: %d records x %d fields", path, len(records), len(records[0])
    )
    return records
