"""
Parser-combinator engine and the RFC4180 grammar built on it.

Layering (leaf to root):
- errors.py: the ``Error`` value, error codes and failure reasons.
- base.py: the ``TextInput`` view, ``Success``/``ParseResult``, the
  ``Parser`` base class and the method-style combinators.
- combinators.py: ``pair``, ``left_from_pair``, ``right_from_pair``,
  ``zero_or_more``.
- chars.py: ``char``, ``any_char``, ``line_break``.
- grammar.py: ``field``, ``record``, ``document`` and ``parse_document``.

Nothing in this sub-package performs I/O; it only ever sees text that is
already in memory.
"""

from csv_combinators.parsers.base import (
    ParseResult,
    Parser,
    Success,
    TextInput,
    as_input,
    as_parser,
    parser,
)
from csv_combinators.parsers.chars import any_char, char, line_break
from csv_combinators.parsers.combinators import (
    left_from_pair,
    pair,
    right_from_pair,
    zero_or_more,
)
from csv_combinators.parsers.errors import (
    END_OF_INPUT,
    Char,
    Error,
    ErrorCode,
    Failure,
    InvalidInput,
    LineBreak,
    NoInput,
    Predicate,
    Reason,
    SystemFailure,
    describe_error,
)
from csv_combinators.parsers.grammar import (
    Document,
    Record,
    document,
    field,
    parse_document,
    record,
)

__all__ = [
    "END_OF_INPUT",
    "Char",
    "Document",
    "Error",
    "ErrorCode",
    "Failure",
    "InvalidInput",
    "LineBreak",
    "NoInput",
    "ParseResult",
    "Parser",
    "Predicate",
    "Reason",
    "Record",
    "Success",
    "SystemFailure",
    "TextInput",
    "any_char",
    "as_input",
    "as_parser",
    "char",
    "describe_error",
    "document",
    "field",
    "left_from_pair",
    "line_break",
    "pair",
    "parse_document",
    "parser",
    "record",
    "right_from_pair",
    "zero_or_more",
]
