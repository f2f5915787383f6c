"""Tests for the delimited text parser."""
import pytest

from readinglog.errors import ParseError
from readinglog.pipeline.tabular import parse_table, split_fields


def test_quoted_field_keeps_embedded_comma():
    """Test a quoted comma stays inside the field and quotes are stripped."""
    table = parse_table('Title,Author,Shelf\n"Book, One","A. Author",read\n')

    rows = list(table)

    assert rows == [{"Title": "Book, One", "Author": "A. Author", "Shelf": "read"}]


def test_header_is_first_non_blank_line():
    """Test leading and interleaved blank lines are skipped."""
    table = parse_table("\n   \nTitle,Author\n\nA,B\n\r\nC,D\n")

    assert table.header == ["Title", "Author"]
    assert list(table) == [
        {"Title": "A", "Author": "B"},
        {"Title": "C", "Author": "D"},
    ]


def test_short_rows_are_padded_and_long_rows_truncated():
    """Test rows are aligned to the header by position."""
    table = parse_table("a,b,c\n1\n1,2,3,4,5\n")

    rows = list(table)

    assert rows[0] == {"a": "1", "b": "", "c": ""}
    assert rows[1] == {"a": "1", "b": "2", "c": "3"}


def test_windows_line_endings_are_trimmed():
    """Test carriage returns do not leak into values."""
    table = parse_table("Title,Shelf\r\nDune,read\r\n")

    assert list(table) == [{"Title": "Dune", "Shelf": "read"}]


def test_table_is_restartable():
    """Test iterating twice yields the same rows."""
    table = parse_table("x,y\n1,2\n3,4\n")

    assert list(table) == list(table)
    assert len(list(table)) == 2


def test_header_only_yields_no_rows():
    """Test a file with just a header is valid and empty."""
    assert list(parse_table("Title,Author\n")) == []


@pytest.mark.parametrize("text", ["", "\n\n", "   \n\t\n"])
def test_no_header_raises_parse_error(text):
    """Test input without a non-blank line is rejected."""
    with pytest.raises(ParseError):
        parse_table(text)


def test_doubled_quotes_are_not_an_escape():
    """Test doubled quotes just toggle state twice and vanish."""
    assert split_fields('"say ""hi""",x') == ["say hi", "x"]
