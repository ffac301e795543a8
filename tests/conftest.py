"""
Shared test fixtures and path constants for csv-combinators tests.

All data file paths are defined here as module-level constants for easy
discovery and modification. If data files move or new ones are added,
update this file.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Data file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent / "data"

BOOKS_CSV = DATA_DIR / "books.csv"            # CRLF, quoted fields, 5 columns
MULTILINE_CSV = DATA_DIR / "multiline.csv"    # LF, a quoted field spanning lines
RAGGED_CSV = DATA_DIR / "ragged.csv"          # second data row is one field short


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against files in tests/data)",
    )
