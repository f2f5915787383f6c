"""
Canonical Book model for the personal reading log.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Optional, Any
from datetime import date, datetime

from ..errors import BookValidationError


GENRES = (
    "Fiction", "Literary Fiction", "Mystery", "Sci-Fi", "Fantasy",
    "Non-Fiction", "History", "Biography", "Essays", "Poetry",
    "Romance", "Thriller", "Self-Help", "Science", "Other",
)

STATUS_FINISHED = "finished"
STATUS_READING = "reading"
STATUS_WISHLIST = "wishlist"
STATUSES = (STATUS_FINISHED, STATUS_READING, STATUS_WISHLIST)

SPINE_PALETTE = (
    "#2C3E6B", "#4A6B8A", "#7A1520", "#1E3A5F", "#5C3D6B",
    "#2A4A5A", "#6B2030", "#1A3048", "#4A3560", "#2E5068",
)

QUOTE_SEPARATOR = "\n\n"

MIN_RATING = 0
MAX_RATING = 10


@dataclass
class Book:
    """
    A single entry in a user's collection.

    Records are replaced whole on save; there are no partial field updates.
    A missing status is read as "finished" for compatibility with entries
    saved before statuses existed.
    """

    title: str
    author: str = ""
    genre: str = GENRES[0]
    id: Optional[str] = None

    # Book metadata
    pages: Optional[int] = None
    isbn: Optional[str] = None

    # Reading timeline
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = STATUS_FINISHED

    # Ratings, 0-10 scale
    rating: Optional[int] = None
    genre_rating: Optional[int] = None

    # User content
    review: str = ""
    private_notes: str = ""
    quotes: str = ""
    recommended_by: str = ""
    book_club_questions: str = ""

    # Display only
    spine_color: str = SPINE_PALETTE[0]

    # Assigned by the Collection Store
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise BookValidationError("Book title must not be empty")
        if self.genre not in GENRES:
            raise BookValidationError(f"Unknown genre: {self.genre!r}")
        if self.status not in STATUSES and self.status not in (None, ""):
            raise BookValidationError(f"Unknown status: {self.status!r}")
        if self.pages is not None and self.pages < 0:
            raise BookValidationError(f"Page count must not be negative: {self.pages}")
        for name in ("rating", "genre_rating"):
            value = getattr(self, name)
            if value is not None and not MIN_RATING <= value <= MAX_RATING:
                raise BookValidationError(f"{name} must be between 0 and 10, got {value}")

    @property
    def is_finished(self) -> bool:
        """True for finished books, including legacy entries with no status"""
        return self.status in (STATUS_FINISHED, None, "")

    @property
    def is_rated(self) -> bool:
        return self.rating is not None

    @property
    def quote_list(self) -> List[str]:
        """Saved passages, one per blank-line separated block"""
        if not self.quotes:
            return []
        passages = (passage.strip() for passage in self.quotes.split(QUOTE_SEPARATOR))
        return [passage for passage in passages if passage]

    @property
    def has_quotes(self) -> bool:
        return bool(self.quote_list)

    @property
    def reading_year(self) -> Optional[int]:
        """Year the book was finished (for annual grouping)"""
        return self.end_date.year if self.end_date else None

    @property
    def reading_month(self) -> Optional[int]:
        """Zero-based month index of the finish date"""
        return self.end_date.month - 1 if self.end_date else None

    def to_dict(self, include_private: bool = True) -> Dict[str, Any]:
        """
        Convert to a JSON-friendly dictionary.

        Private notes stay with the owner; pass include_private=False for
        anything that leaves the owner's context.
        """
        data = asdict(self)
        data["start_date"] = self.start_date.isoformat() if self.start_date else None
        data["end_date"] = self.end_date.isoformat() if self.end_date else None
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        if not include_private:
            data.pop("private_notes")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        """Rebuild a Book from to_dict() output, ignoring unknown keys"""
        known = {name for name in cls.__dataclass_fields__}
        values = {key: value for key, value in data.items() if key in known}

        for key in ("start_date", "end_date"):
            if values.get(key):
                values[key] = date.fromisoformat(values[key])
            else:
                values[key] = None
        if values.get("created_at"):
            values["created_at"] = datetime.fromisoformat(values["created_at"])

        for key in ("review", "private_notes", "quotes", "recommended_by", "book_club_questions"):
            if values.get(key) is None:
                values.pop(key, None)

        return cls(**values)


@dataclass
class MergePlan:
    """Outcome of merging an import batch against an existing collection"""
    to_persist: List[Book] = field(default_factory=list)
    skipped: List[Book] = field(default_factory=list)
