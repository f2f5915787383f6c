"""
Typed view of a single Goodreads export row.
"""

from dataclasses import dataclass
from typing import Dict, Optional


# Goodreads export column names
TITLE = "Title"
AUTHOR = "Author"
NUMBER_OF_PAGES = "Number of Pages"
DATE_READ = "Date Read"
MY_RATING = "My Rating"
MY_REVIEW = "My Review"
EXCLUSIVE_SHELF = "Exclusive Shelf"
ISBN = "ISBN"
ISBN13 = "ISBN13"

READ_SHELF = "read"


def _optional(record: Dict[str, str], column: str) -> Optional[str]:
    value = record.get(column)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class GoodreadsRow:
    """
    One export row with every column optional.

    Values stay as text here; numeric and date coercion belongs to the
    RecordMapper so that a bad cell drops a field, not the row.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    number_of_pages: Optional[str] = None
    date_read: Optional[str] = None
    my_rating: Optional[str] = None
    my_review: Optional[str] = None
    exclusive_shelf: Optional[str] = None
    isbn: Optional[str] = None
    isbn13: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, str]) -> "GoodreadsRow":
        return cls(
            title=_optional(record, TITLE),
            author=_optional(record, AUTHOR),
            number_of_pages=_optional(record, NUMBER_OF_PAGES),
            date_read=_optional(record, DATE_READ),
            my_rating=_optional(record, MY_RATING),
            my_review=_optional(record, MY_REVIEW),
            exclusive_shelf=_optional(record, EXCLUSIVE_SHELF),
            isbn=_optional(record, ISBN),
            isbn13=_optional(record, ISBN13),
        )

    @property
    def is_importable(self) -> bool:
        """Only titled rows on the exact "read" shelf are imported"""
        return bool(self.title) and self.exclusive_shelf == READ_SHELF
