"""
Parser abstraction for the combinator engine.

The contract:
1. A parser maps a ``TextInput`` to a ``ParseResult``: either
   ``Success(remaining, output)`` or an ``Error``.
2. On success, ``remaining`` is a suffix of the input that was passed in.
   Input views are never mutated; consuming a prefix produces a new view.

Any unary callable with that signature is a parser. ``as_parser`` adapts
such a callable, every combinator accepts one, and the ``@parser``
decorator turns a grammar rule written as a plain function into a
``Parser`` so it can be chained with the method-style combinators below.

Method-style combinators (so chains read left to right):
- ``map``: transform a successful output.
- ``and_then_map``: build the next parser from a successful output.
- ``fallback_on``: retry an alternative after a recoverable failure.
- ``iff`` / ``iff_or_invalid``: accept an output only if a predicate holds.

Function-style combinators (``pair``, ``zero_or_more``, ...) live in
``combinators.py``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, NamedTuple, TypeVar, Union

from csv_combinators.parsers.errors import PREDICATE, Error, InvalidInput

O = TypeVar("O")
O2 = TypeVar("O2")


# ---------------------------------------------------------------------------
# Input view
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextInput:
    """Immutable view over in-memory text, starting at ``offset``.

    Copying a view is free and the underlying string is shared, so parsers
    can hand out new views without copying text.
    """
    text: str
    offset: int = 0

    @property
    def rest(self) -> str:
        """The remaining (unconsumed) text."""
        return self.text[self.offset:]

    def __len__(self) -> int:
        return len(self.text) - self.offset

    def __repr__(self) -> str:
        preview = self.text[self.offset:self.offset + 20]
        if len(self) > 20:
            preview += "..."
        return f"TextInput(offset={self.offset}, rest={preview!r})"

    def peek(self) -> str | None:
        """Next character, or ``None`` when the input is exhausted."""
        if self.offset < len(self.text):
            return self.text[self.offset]
        return None

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.offset)

    def advance(self, n: int) -> TextInput:
        """A new view with the next ``n`` characters consumed."""
        return TextInput(self.text, min(self.offset + n, len(self.text)))

    def location(self) -> tuple[int, int]:
        """1-based ``(line, column)`` of the current offset.

        Lines are counted by LF, so CRLF and LF documents report the same
        line numbers.
        """
        line = self.text.count("\n", 0, self.offset) + 1
        line_start = self.text.rfind("\n", 0, self.offset) + 1
        return line, self.offset - line_start + 1


def as_input(value: TextInput | str) -> TextInput:
    """Coerce plain text into a view at offset 0."""
    if isinstance(value, TextInput):
        return value
    if isinstance(value, str):
        return TextInput(value)
    raise TypeError(f"Expected str or TextInput, got {type(value).__name__}")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class Success(NamedTuple):
    """Successful parse: the remaining input and the produced value."""
    remaining: TextInput
    output: Any


ParseResult = Union[Success, Error]
ParseFn = Callable[[TextInput], ParseResult]


# ---------------------------------------------------------------------------
# Parser base class
# ---------------------------------------------------------------------------

class Parser(ABC, Generic[O]):
    """Base class for all parsers.

    Subclasses implement ``parse_input``. Calling a parser (or its
    ``parse`` method) also accepts a plain string.
    """

    @abstractmethod
    def parse_input(self, input: TextInput) -> ParseResult:
        """Parse a prefix of *input*."""

    def parse(self, input: TextInput | str) -> ParseResult:
        return self.parse_input(as_input(input))

    def __call__(self, input: TextInput | str) -> ParseResult:
        return self.parse_input(as_input(input))

    def map(self, map_fn: Callable[[O], O2]) -> Parser[O2]:
        """Apply *map_fn* to the output on success."""
        return Map(self, map_fn)

    def and_then_map(self, map_fn: Callable[[O], Any]) -> Parser[Any]:
        """Build a parser from the output and run it on the remainder."""
        return AndThenMap(self, map_fn)

    def fallback_on(self, fallback: Any) -> Parser[O]:
        """Retry *fallback* from the original input on a recoverable error."""
        return Fallback(self, fallback)

    def iff(self, predicate: Callable[[O], bool]) -> Parser[O]:
        """Accept the output only if *predicate* holds (recoverable otherwise)."""
        return Filter(self, predicate, assume_invalid=False)

    def iff_or_invalid(
        self,
        predicate: Callable[[O], bool],
        expected: str = "unknown",
    ) -> Parser[O]:
        """Accept the output only if *predicate* holds.

        A rejected output is reported as a hard ``InvalidInput`` failure
        carrying *expected*, so no alternative is tried.
        """
        return Filter(self, predicate, assume_invalid=True, expected=expected)


class FnParser(Parser[O]):
    """Adapts a plain parse function."""

    def __init__(self, fn: ParseFn) -> None:
        self.fn = fn

    def parse_input(self, input: TextInput) -> ParseResult:
        return self.fn(input)

    def __repr__(self) -> str:
        return f"FnParser({getattr(self.fn, '__name__', self.fn)!r})"


def as_parser(p: Parser[O] | ParseFn) -> Parser[O]:
    """Adapt any callable with the parse-function signature into a ``Parser``."""
    if isinstance(p, Parser):
        return p
    if callable(p):
        return FnParser(p)
    raise TypeError(f"Not a parser: {p!r}")


def parser(fn: ParseFn) -> Parser[Any]:
    """Decorator turning a grammar rule function into a composable ``Parser``."""
    wrapped = FnParser(fn)
    wrapped.__doc__ = fn.__doc__
    return wrapped


# ---------------------------------------------------------------------------
# Method-style combinators
# ---------------------------------------------------------------------------

class Map(Parser[O2]):
    """Applies a function to the output of a successful parse."""

    def __init__(self, inner: Any, map_fn: Callable[[Any], O2]) -> None:
        self.inner = as_parser(inner)
        self.map_fn = map_fn

    def parse_input(self, input: TextInput) -> ParseResult:
        result = self.inner.parse_input(input)
        if isinstance(result, Error):
            return result
        return Success(result.remaining, self.map_fn(result.output))


class AndThenMap(Parser[O2]):
    """Builds the next parser from the first parser's output (monadic bind)."""

    def __init__(self, first: Any, map_fn: Callable[[Any], Any]) -> None:
        self.first = as_parser(first)
        self.map_fn = map_fn

    def parse_input(self, input: TextInput) -> ParseResult:
        result = self.first.parse_input(input)
        if isinstance(result, Error):
            return result
        return as_parser(self.map_fn(result.output)).parse_input(result.remaining)


class Fallback(Parser[O]):
    """Tries a fallback parser after a recoverable failure of the primary.

    The fallback restarts from the original input. A hard failure of the
    primary is returned as is.
    """

    def __init__(self, primary: Any, fallback: Any) -> None:
        self.primary = as_parser(primary)
        self.fallback = as_parser(fallback)

    def parse_input(self, input: TextInput) -> ParseResult:
        result = self.primary.parse_input(input)
        if isinstance(result, Error) and not result.is_failure():
            return self.fallback.parse_input(input)
        return result


class Filter(Parser[O]):
    """Accepts a successful output only if it satisfies a predicate.

    Rejections are positioned at the original input so that an enclosing
    ``fallback_on`` can retry from the start.
    """

    def __init__(
        self,
        inner: Any,
        predicate: Callable[[Any], bool],
        assume_invalid: bool = False,
        expected: str = "unknown",
    ) -> None:
        self.inner = as_parser(inner)
        self.predicate = predicate
        self.assume_invalid = assume_invalid
        self.expected = expected

    def parse_input(self, input: TextInput) -> ParseResult:
        result = self.inner.parse_input(input)
        if isinstance(result, Error):
            return result
        if self.predicate(result.output):
            return result
        if self.assume_invalid:
            return Error.failure(input, InvalidInput(self.expected))
        return Error(input, PREDICATE)
