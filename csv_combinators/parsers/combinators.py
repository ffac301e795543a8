"""
Function-style parser combinators.

- ``pair``: run two parsers in sequence, returning both outputs.
- ``left_from_pair`` / ``right_from_pair``: sequence two parsers and keep
  one side (e.g. consume a delimiter, keep the value).
- ``zero_or_more``: repeat a parser until it fails.

Errors raised by the second half of a ``pair`` are re-positioned at the
pair's own input, so an enclosing fallback or repetition retries (or stops
before) the whole sequence rather than resuming in the middle of it.
"""

from __future__ import annotations

from typing import Any

from csv_combinators.parsers.base import (
    FnParser,
    ParseResult,
    Parser,
    Success,
    TextInput,
    as_parser,
)
from csv_combinators.parsers.errors import Error, SystemFailure


def pair(left: Any, right: Any) -> Parser[tuple[Any, Any]]:
    """Parse *left* then *right*, producing ``(left_output, right_output)``."""
    left, right = as_parser(left), as_parser(right)

    def parse_pair(input: TextInput) -> ParseResult:
        first = left.parse_input(input)
        if isinstance(first, Error):
            return first
        second = right.parse_input(first.remaining)
        if isinstance(second, Error):
            return Error(input, second.code)
        return Success(second.remaining, (first.output, second.output))

    return FnParser(parse_pair)


def left_from_pair(left: Any, right: Any) -> Parser[Any]:
    """Parse *left* then *right*, keeping only the left output."""
    return pair(left, right).map(lambda outputs: outputs[0])


def right_from_pair(left: Any, right: Any) -> Parser[Any]:
    """Parse *left* then *right*, keeping only the right output."""
    return pair(left, right).map(lambda outputs: outputs[1])


def zero_or_more(inner: Any) -> Parser[list[Any]]:
    """Apply *inner* repeatedly, collecting outputs until it fails.

    A recoverable failure ends the repetition successfully, with the
    remaining input positioned at the start of the failed attempt. A hard
    failure is propagated even if earlier repetitions succeeded.

    *inner* must consume input on every success; a success that consumes
    nothing is reported as a ``SystemFailure`` instead of looping forever.
    """
    inner = as_parser(inner)

    def parse_many(input: TextInput) -> ParseResult:
        outputs: list[Any] = []
        while True:
            result = inner.parse_input(input)
            if isinstance(result, Error):
                if result.is_failure():
                    return result
                return Success(input, outputs)
            if len(result.remaining) >= len(input):
                return Error.failure(input, SystemFailure())
            outputs.append(result.output)
            input = result.remaining

    return FnParser(parse_many)
