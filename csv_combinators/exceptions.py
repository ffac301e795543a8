"""
Custom exception hierarchy for csv-combinators.

The parser engine itself never raises for malformed input: it returns an
``Error`` value. These exceptions belong to the layers around it (file
reading, configuration, export), where callers want to catch a specific
failure without relying on generic ValueError/RuntimeError.
"""

from __future__ import annotations

from csv_combinators.parsers.errors import Error, describe_error


class CsvCombinatorsError(Exception):
    """Base exception for all csv-combinators errors."""


class DocumentParseError(CsvCombinatorsError):
    """Raised when a document is rejected by the grammar.

    Wraps the ``Error`` returned by ``parse_document`` so callers get the
    failure position (line and column) and what was expected.
    """

    def __init__(self, error: Error, source: str | None = None) -> None:
        self.error = error
        self.source = source
        self.line, self.column = error.input.location()
        where = f"{source}: " if source else ""
        super().__init__(f"{where}invalid CSV at {describe_error(error)}")


class ConfigValidationError(CsvCombinatorsError):
    """Raised when a conversion config fails validation.

    This can happen if:
    - The config file is empty.
    - The header record names the same column twice while ``header`` is on.
    """


class ExportError(CsvCombinatorsError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """


class SourceDecodeError(CsvCombinatorsError):
    """Raised when a source file cannot be decoded with the configured encoding.

    Set ``source.encoding`` in the config (e.g. ``latin-1``) for files that
    are not UTF-8.
    """

    def __init__(self, path: str, encoding: str, reason: UnicodeDecodeError) -> None:
        self.path = path
        self.encoding = encoding
        self.position = reason.start
        super().__init__(
            f"{path}: cannot decode as {encoding} at byte {reason.start}: {reason.reason}"
        )
