"""Shared fixtures for reading log tests."""
from datetime import date, datetime

import pytest

from readinglog.models.book import Book
from readinglog.stores import InMemoryCollectionStore


GOODREADS_EXPORT = '''Book Id,Title,Author,ISBN,ISBN13,My Rating,Number of Pages,Date Read,My Review,Exclusive Shelf
1,"Piranesi","Susanna Clarke","=""0593189965""","=""9780593189962""",5,272,2024/03/14,"Strange, lovely.",read
2,"Project Hail Mary","Andy Weir",,,4,496,2024/07/02,,read
3,"The Overstory","Richard Powers",,,0,,2023/11/30,,read
4,"Middlemarch","George Eliot",,,0,904,,,to-read

5,"Dune","Frank Herbert",,,3.5,412,not a date,,currently-reading
6,,"Nobody",,,4,100,2024/01/01,,read
'''


def make_book(title="A Book", **kwargs):
    """Build a Book with sensible defaults for analytics tests."""
    return Book(title=title, **kwargs)


@pytest.fixture
def goodreads_export():
    return GOODREADS_EXPORT


@pytest.fixture
def store():
    return InMemoryCollectionStore()


@pytest.fixture
def import_time():
    return datetime(2024, 12, 31, 12, 0, 0)


@pytest.fixture
def sample_collection():
    """Small mixed collection in insertion order."""
    return [
        make_book("Piranesi", id="b1", author="Susanna Clarke", genre="Fantasy", pages=272,
                  rating=10, end_date=date(2024, 3, 14), quotes="House of halls.\n\nThe beauty of the house."),
        make_book("Jonathan Strange", id="b2", author="Susanna Clarke", genre="Fantasy", pages=1006,
                  rating=8, end_date=date(2024, 3, 28), recommended_by="Sam"),
        make_book("Project Hail Mary", id="b3", author="Andy Weir", genre="Sci-Fi", pages=496,
                  rating=9, end_date=date(2024, 7, 2), recommended_by="Alex"),
        make_book("The Overstory", id="b4", author="Richard Powers", genre="Literary Fiction",
                  pages=502, rating=6, end_date=date(2023, 11, 30), status=None,
                  recommended_by="Jo", quotes="Trees."),
        make_book("Middlemarch", id="b5", author="George Eliot", genre="Fiction", pages=904,
                  status="wishlist"),
        make_book("Dune", id="b6", author="Frank Herbert", genre="Sci-Fi", pages=412,
                  status="reading", quotes="Fear is the mind-killer."),
        make_book("Gilead", id="b7", author="Marilynne Robinson", genre="Literary Fiction",
                  pages=247, rating=9, status="finished"),
    ]
