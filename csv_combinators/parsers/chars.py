"""
Character-level primitive parsers.

- ``char(c)``: exactly one ``c``.
- ``any_char``: any single character.
- ``line_break``: ``"\\n"`` or ``"\\r\\n"`` as a single token.

All errors are recoverable and positioned at the untouched input.
"""

from __future__ import annotations

from csv_combinators.parsers.base import (
    FnParser,
    ParseResult,
    Parser,
    Success,
    TextInput,
    parser,
)
from csv_combinators.parsers.errors import END_OF_INPUT, LINE_BREAK, Char, Error


def char(ch: str) -> Parser[str]:
    """Build a parser that recognizes the single character *ch*."""
    if len(ch) != 1:
        raise ValueError(f"char() expects a single character, got {ch!r}")

    def parse_char(input: TextInput) -> ParseResult:
        next_ch = input.peek()
        if next_ch is None:
            return Error(input, END_OF_INPUT)
        if next_ch != ch:
            return Error(input, Char(ch))
        return Success(input.advance(1), ch)

    return FnParser(parse_char)


@parser
def any_char(input: TextInput) -> ParseResult:
    """Consume one character of any value."""
    next_ch = input.peek()
    if next_ch is None:
        return Error(input, END_OF_INPUT)
    return Success(input.advance(1), next_ch)


@parser
def line_break(input: TextInput) -> ParseResult:
    """Consume a line break: LF or CRLF. A lone CR is not a line break."""
    if input.startswith("\n"):
        return Success(input.advance(1), "\n")
    if input.startswith("\r\n"):
        return Success(input.advance(2), "\r\n")
    return Error(input, LINE_BREAK)
