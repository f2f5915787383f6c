"""Tests for the Book model."""
from datetime import date, datetime, timezone

import pytest

from readinglog.errors import BookValidationError
from readinglog.models.book import Book


def test_missing_status_counts_as_finished():
    """Test legacy books without a status are treated as finished."""
    assert Book(title="Old", status=None).is_finished
    assert Book(title="Old", status="").is_finished
    assert not Book(title="Next", status="wishlist").is_finished


def test_quotes_split_on_blank_lines():
    """Test passages are separated by a double line break."""
    book = Book(title="Gilead", quotes="First passage.\n\n\n\n  Second passage.  \n\n")

    assert book.quote_list == ["First passage.", "Second passage."]
    assert book.has_quotes


def test_single_line_breaks_stay_in_one_passage():
    """Test a single newline does not start a new passage."""
    assert Book(title="Poems", quotes="line one\nline two").quote_list == ["line one\nline two"]


def test_reading_year_and_month_come_from_end_date():
    """Test finish-date grouping keys, with a zero-based month."""
    book = Book(title="Winter", end_date=date(2024, 12, 30))

    assert book.reading_year == 2024
    assert book.reading_month == 11
    assert Book(title="Undated").reading_year is None
    assert Book(title="Undated").reading_month is None


@pytest.mark.parametrize("kwargs", [
    {"title": ""},
    {"title": "   "},
    {"title": "X", "rating": 11},
    {"title": "X", "genre_rating": -1},
    {"title": "X", "pages": -5},
    {"title": "X", "genre": "Cookbooks"},
    {"title": "X", "status": "abandoned"},
])
def test_invalid_books_are_rejected(kwargs):
    """Test field invariants are checked on construction."""
    with pytest.raises(BookValidationError):
        Book(**kwargs)


def test_dict_round_trip_keeps_dates():
    """Test to_dict/from_dict preserve dates and timestamps."""
    book = Book(
        title="Gilead",
        id="g1",
        end_date=date(2024, 4, 5),
        created_at=datetime(2024, 4, 5, 8, 30, tzinfo=timezone.utc),
        private_notes="secret",
    )

    assert Book.from_dict(book.to_dict()) == book


def test_public_dict_hides_private_notes():
    """Test private notes are dropped outside the owner's context."""
    data = Book(title="Gilead", private_notes="secret").to_dict(include_private=False)

    assert "private_notes" not in data


def test_from_dict_ignores_unknown_keys():
    """Test stored rows with extra columns still load."""
    book = Book.from_dict({"title": "Dune", "user_id": "abc", "quotes": None})

    assert book.title == "Dune"
    assert book.quotes == ""
