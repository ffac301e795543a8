"""
RFC4180-style grammar built from the combinator library.

Grammar (EBNF, after https://www.rfc-editor.org/rfc/rfc4180)::

    DOCUMENT    = RECORD (LINEBREAK RECORD)* [LINEBREAK]
    RECORD      = FIELD (COMMA FIELD)*
    FIELD       = ESCAPED | NON-ESCAPED
    ESCAPED     = DQUOTE (TEXT | COMMA | CR | LF | DDQUOTE)* DQUOTE
    NON-ESCAPED = TEXT*
    DDQUOTE     = '""'            (decodes to a single '"')
    LINEBREAK   = LF | CRLF
    (* TEXT is any character other than CR, LF, COMMA or DQUOTE *)

Deviations from the written grammar:
- An empty input is not a record (``NoInput``), even though the grammar
  reads it as one empty field.
- Every record must have as many fields as the first one. A record that
  parses but has a different width is a hard failure, so a malformed
  document is rejected instead of silently truncated.
"""

from __future__ import annotations

import logging

from csv_combinators.parsers.base import (
    ParseResult,
    Parser,
    Success,
    TextInput,
    as_input,
    parser,
)
from csv_combinators.parsers.chars import any_char, char, line_break
from csv_combinators.parsers.combinators import (
    left_from_pair,
    pair,
    right_from_pair,
    zero_or_more,
)
from csv_combinators.parsers.errors import NO_INPUT, Error, InvalidInput

logger = logging.getLogger(__name__)

Record = list[str]
Document = list[Record]

MORE_FIELDS_EXPECTED = "more fields in this record"
TRAILING_EXPECTED = "comma or a line break"

_SPECIAL = frozenset(',"\r\n')

comma = char(",")
dquote = char('"')


def is_special(ch: str) -> bool:
    """True for characters that cannot appear in an unquoted field."""
    return ch in _SPECIAL


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------

non_escaped: Parser[str] = zero_or_more(
    any_char.iff(lambda ch: not is_special(ch))
).map("".join)

escaped: Parser[str] = right_from_pair(
    dquote,
    left_from_pair(
        zero_or_more(
            any_char.iff(lambda ch: ch != '"').fallback_on(left_from_pair(dquote, dquote))
        ),
        dquote,
    ),
).map("".join)


_field = escaped.fallback_on(non_escaped)


@parser
def field(input: TextInput) -> ParseResult:
    """Single field: quoted if it starts with ``"``, otherwise unquoted.

    Never fails: an input that is not a complete quoted field is read as an
    (possibly empty) unquoted one.
    """
    return _field.parse_input(input)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

_fields = pair(field, zero_or_more(right_from_pair(comma, field))).map(
    lambda fields: [fields[0], *fields[1]]
)


@parser
def record(input: TextInput) -> ParseResult:
    """Single record: one or more comma-separated fields.

    Empty input is rejected with ``NoInput``.
    """
    if not input:
        return Error(input, NO_INPUT)
    return _fields.parse_input(input)


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def records_like(first: Record) -> Parser[Document]:
    """Parser for the records following *first*, which all need its width."""
    width = len(first)
    following = record.iff_or_invalid(
        lambda rec: len(rec) == width,
        expected=MORE_FIELDS_EXPECTED,
    )
    return zero_or_more(right_from_pair(line_break, following)).map(
        lambda others: [first, *others]
    )


_records = record.and_then_map(records_like)


@parser
def document(input: TextInput) -> ParseResult:
    """Whole document: records separated by line breaks.

    A single trailing line break is allowed. Any other leftover input is a
    hard failure.
    """
    result = _records.parse_input(input)
    if isinstance(result, Error):
        return result

    trailing = result.remaining
    if not trailing:
        return result

    end = line_break.parse_input(trailing)
    if isinstance(end, Success) and not end.remaining:
        return Success(end.remaining, result.output)
    return Error.failure(trailing, InvalidInput(TRAILING_EXPECTED))


def parse_document(input: TextInput | str) -> ParseResult:
    """Parse a complete in-memory document.

    Args:
        input: The full text (or a view over it).

    Returns:
        ``Success(remaining, records)`` with an empty remainder, or the
        ``Error`` that stopped parsing. Never raises for malformed input.
    """
    input = as_input(input)
    result = document.parse_input(input)
    if isinstance(result, Error):
        logger.debug(
            "Document rejected at offset %d: %s", result.input.offset, result.code
        )
    else:
        logger.debug(
            "Parsed %d records of %d fields",
            len(result.output),
            len(result.output[0]),
        )
    return result
