"""
RFC4180 writer: the inverse of the grammar.

Fields containing a comma, double quote, CR or LF are quoted, with inner
double quotes doubled. Everything else is written as is, so a document made
of plain fields is written byte-for-byte as a human would type it.

The one special case is a record made of a single empty field: written bare
it would be an empty line, which the grammar does not read back as a
record, so it is written as ``""``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from csv_combinators.parsers.grammar import is_special

CRLF = "\r\n"


def format_field(value: str) -> str:
    """Quote *value* if it contains a character the unquoted form cannot hold."""
    if any(is_special(ch) for ch in value):
        return '"' + value.replace('"', '""') + '"'
    return value


def format_record(record: Sequence[str]) -> str:
    """Join one record's fields with commas."""
    if not record:
        raise ValueError("A record needs at least one field")
    if len(record) == 1 and record[0] == "":
        return '""'
    return ",".join(format_field(value) for value in record)


def format_document(
    records: Iterable[Sequence[str]],
    line_terminator: str = CRLF,
    trailing_line_break: bool = True,
) -> str:
    """Render records as document text.

    Args:
        records: Rows of field strings. All rows should have the same width,
            otherwise the output will not parse back.
        line_terminator: ``"\\r\\n"`` (RFC4180 default) or ``"\\n"``.
        trailing_line_break: Terminate the last record too.

    Returns:
        The document text.
    """
    if line_terminator not in ("\r\n", "\n"):
        raise ValueError(f"Unsupported line terminator: {line_terminator!r}")
    text = line_terminator.join(format_record(record) for record in records)
    if text and trailing_line_break:
        text += line_terminator
    return text
