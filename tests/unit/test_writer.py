"""
Unit tests for csv_combinators.writer.
"""

from __future__ import annotations

import pytest

from csv_combinators.writer import format_document, format_field, format_record


class TestFormatField:
    """Tests for format_field()."""

    @pytest.mark.parametrize("value", ["plain", "", " spaced ", "đ€"])
    def test_plain_values_are_not_quoted(self, value):
        assert format_field(value) == value

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("a,b", '"a,b"'),
            ('say "hi"', '"say ""hi"""'),
            ("two\nlines", '"two\nlines"'),
            ("cr\ronly", '"cr\ronly"'),
        ],
    )
    def test_special_values_are_quoted(self, value, expected):
        assert format_field(value) == expected


class TestFormatRecord:
    """Tests for format_record()."""

    def test_joins_with_commas(self):
        assert format_record(["a", "b,c", ""]) == 'a,"b,c",'

    def test_single_empty_field_is_quoted(self):
        assert format_record([""]) == '""'

    def test_empty_record_is_rejected(self):
        with pytest.raises(ValueError, match="at least one field"):
            format_record([])


class TestFormatDocument:
    """Tests for format_document()."""

    def test_crlf_default(self):
        assert format_document([["a", "b"], ["c", "d"]]) == "a,b\r\nc,d\r\n"

    def test_lf_without_trailing_break(self):
        text = format_document(
            [["a"], ["b"]], line_terminator="\n", trailing_line_break=False
        )
        assert text == "a\nb"

    def test_no_records(self):
        assert format_document([]) == ""

    def test_accepts_tuples_and_generators(self):
        rows = (("x", "y") for _ in range(2))
        assert format_document(rows) == "x,y\r\nx,y\r\n"

    def test_unsupported_terminator(self):
        with pytest.raises(ValueError, match="Unsupported line terminator"):
            format_document([["a"]], line_terminator="\r")
