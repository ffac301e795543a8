"""
Error model for the parser engine.

Every parser returns either a success or an ``Error``. An ``Error`` records
*where* parsing stopped (the input view at the point of failure) and *why*
(an ``ErrorCode``).

Error codes come in two flavours:

- **Recoverable** (``NoInput``, ``Char``, ``LineBreak``, ``Predicate``):
  an expected token was absent. Combinators may retry an alternative from
  the same input or end a repetition.
- **Hard** (``Failure``): the input was positively identified as invalid, or
  the engine hit an inconsistent state. Never retried; it unwinds the whole
  parse.

``Error.is_failure()`` is the only signal combinators look at.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from csv_combinators.parsers.base import TextInput


# ---------------------------------------------------------------------------
# Reasons (why a hard failure cannot be recovered from)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SystemFailure:
    """The engine itself reached an inconsistent state."""


@dataclass(frozen=True)
class InvalidInput:
    """The input is structurally invalid for the grammar being parsed."""
    expected: str


Reason = Union[SystemFailure, InvalidInput]


# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Failure:
    """Hard, non-recoverable failure."""
    reason: Reason


@dataclass(frozen=True)
class NoInput:
    """Input was required but none was left."""


@dataclass(frozen=True)
class Char:
    """A specific character was expected."""
    expected: str


@dataclass(frozen=True)
class LineBreak:
    """A line break (LF or CRLF) was expected."""


@dataclass(frozen=True)
class Predicate:
    """A parsed value was rejected by a predicate."""


ErrorCode = Union[Failure, NoInput, Char, LineBreak, Predicate]

NO_INPUT = NoInput()
LINE_BREAK = LineBreak()
PREDICATE = Predicate()

# Sentinel code reported by character parsers on exhausted input.
END_OF_INPUT = Char("\0")


# ---------------------------------------------------------------------------
# Error value
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Error:
    """A parse error.

    Attributes:
        input: The input view at the point of failure. Always a suffix of
            (or equal to) the input given to the failing parser.
        code: What was expected, or ``Failure`` for a hard failure.
    """
    input: TextInput
    code: ErrorCode

    @classmethod
    def failure(cls, input: TextInput, reason: Reason) -> Error:
        """Build a hard failure wrapped in ``Failure``."""
        return cls(input, Failure(reason))

    def is_failure(self) -> bool:
        return isinstance(self.code, Failure)


def describe_code(code: ErrorCode) -> str:
    """Render an error code as an ``expected ...`` phrase."""
    if isinstance(code, Failure):
        if isinstance(code.reason, InvalidInput):
            return f"expected {code.reason.expected}"
        return "internal parser failure"
    if code == END_OF_INPUT:
        return "unexpected end of input"
    if isinstance(code, Char):
        return f"expected {code.expected!r}"
    if isinstance(code, LineBreak):
        return "expected a line break"
    if isinstance(code, NoInput):
        return "expected input, found none"
    return "value rejected by predicate"


def describe_error(error: Error) -> str:
    """Human-readable message for an error, including its line and column."""
    line, column = error.input.location()
    return f"line {line}, column {column}: {describe_code(error.code)}"
