"""
Unit tests for section and header-line parsing (section_parser.py).

Tests cover:
- Header line decomposition (primary pair, parameters, quote trimming)
- Degenerate header lines (no name separator, parameter without '=')
- Section splitting into headers and body (text and bytes)
- Headerless sections and malformed sections
"""

import pytest

from formwire.models.multipart import Header
from formwire.parsing.errors import MalformedSectionError
from formwire.parsing.section_parser import (
    parse_header_line,
    parse_section,
    trim_quotes,
)


class TestTrimQuotes:
    """Tests for trim_quotes() function."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ('"file"', "file"),
            ("file", "file"),
            ('""', ""),
            ('"', '"'),
            ('"file', '"file'),
            ('file"', 'file"'),
        ],
    )
    def test_trim_quotes(self, value, expected):
        assert trim_quotes(value) == expected


class TestParseHeaderLine:
    """Tests for parse_header_line() function."""

    @pytest.mark.unit
    def test_quoted_param(self):
        header = parse_header_line('Content-Disposition: form-data; name="f"')

        assert header.pair == ("Content-Disposition", "form-data")
        assert header.params == {"name": "f"}

    @pytest.mark.unit
    def test_mixed_quoting(self):
        header = parse_header_line(
            'Content-Disposition: form-data; name="file"; filename=report.txt'
        )

        assert header.name == "Content-Disposition"
        assert header.value == "form-data"
        assert header.params == {"name": "file", "filename": "report.txt"}

    @pytest.mark.unit
    def test_two_unquoted_params(self):
        header = parse_header_line("X-Test: value; a=1; b=2")
        assert header.params == {"a": "1", "b": "2"}

    @pytest.mark.unit
    def test_header_without_params(self):
        header = parse_header_line("Content-Type: text/plain")

        assert header == Header(name="Content-Type", value="text/plain")
        assert header.params == {}

    @pytest.mark.unit
    def test_params_never_contain_primary_pair(self):
        header = parse_header_line('Content-Disposition: form-data; name="a"')
        assert "Content-Disposition" not in header.params
        assert "form-data" not in header.params.values()

    @pytest.mark.unit
    def test_line_without_name_separator(self):
        """Test a line without ': ' yields an empty primary pair."""
        header = parse_header_line("garbage")
        assert header.pair == ("", "")
        assert header.params == {}

    @pytest.mark.unit
    def test_param_without_equals(self):
        header = parse_header_line("Content-Disposition: form-data; name")
        assert header.params == {"name": ""}

    @pytest.mark.unit
    def test_param_value_with_equals(self):
        header = parse_header_line("X-Token: t; sig=a=b")
        assert header.params == {"sig": "a=b"}

    @pytest.mark.unit
    def test_repeated_param_keeps_first(self):
        header = parse_header_line("X-Test: v; a=1; a=2")
        assert header.params == {"a": "1"}

    @pytest.mark.unit
    def test_value_keeps_colon(self):
        header = parse_header_line("X-Time: 10:30")
        assert header.pair == ("X-Time", "10:30")


class TestParseSection:
    """Tests for parse_section() function."""

    @pytest.mark.unit
    def test_parse_text_section(self):
        part = parse_section('Content-Disposition: form-data; name="a"\r\n\r\nhello\r\n')

        assert len(part.headers) == 1
        assert part.headers[0].pair == ("Content-Disposition", "form-data")
        assert part.headers[0].params == {"name": "a"}
        assert part.body == "hello"

    @pytest.mark.unit
    def test_parse_bytes_section_keeps_bytes_body(self):
        part = parse_section(
            b"Content-Type: application/octet-stream\r\n\r\n\x89PNG\xff\x00\r\n"
        )

        assert part.headers[0].value == "application/octet-stream"
        assert part.body == b"\x89PNG\xff\x00"

    @pytest.mark.unit
    def test_header_order_preserved(self):
        part = parse_section(
            'Content-Disposition: form-data; name="file"; filename="a.txt"\r\n'
            "Content-Type: text/plain\r\n"
            "X-Extra: 1\r\n"
            "\r\n"
            "data\r\n"
        )

        assert [h.name for h in part.headers] == [
            "Content-Disposition",
            "Content-Type",
            "X-Extra",
        ]

    @pytest.mark.unit
    def test_body_keeps_inner_blank_lines(self):
        part = parse_section("Content-Type: text/plain\r\n\r\nline one\r\n\r\nline two\r\n")
        assert part.body == "line one\r\n\r\nline two"

    @pytest.mark.unit
    def test_empty_body(self):
        part = parse_section('Content-Disposition: form-data; name="a"\r\n\r\n\r\n')
        assert part.body == ""

    @pytest.mark.unit
    def test_headerless_section(self):
        part = parse_section("\r\nno headers here\r\n")
        assert part.headers == []
        assert part.body == "no headers here"

    @pytest.mark.unit
    def test_utf8_header_in_bytes_section(self):
        part = parse_section(
            'Content-Disposition: form-data; name="f"; filename="résumé.pdf"\r\n\r\nx\r\n'.encode("utf-8")
        )
        assert part.filename == "résumé.pdf"

    @pytest.mark.unit
    def test_missing_separator_raises(self):
        with pytest.raises(MalformedSectionError):
            parse_section("Content-Disposition: form-data\r\nhello\r\n")
