"""
Immutable view structures produced by the analytics and goal modules.
"""

from dataclasses import dataclass, field, asdict
from typing import Tuple, Dict, Optional, Any

from .book import Book


def _book_summary(book: Optional[Book]) -> Optional[Dict[str, Any]]:
    return book.to_dict(include_private=False) if book else None


@dataclass(frozen=True)
class GenreCount:
    genre: str
    count: int


@dataclass(frozen=True)
class AuthorCount:
    author: str
    count: int


@dataclass(frozen=True)
class QuotePick:
    """A saved passage and the title of the book it came from"""
    book_title: str
    quote: str


@dataclass(frozen=True)
class LifetimeStats:
    total_books_read: int = 0
    total_pages: int = 0
    average_rating: Optional[float] = None  # None = no rated books
    average_pages: Optional[float] = None
    recent_books: Tuple[Book, ...] = ()
    top_rated_books: Tuple[Book, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_books_read": self.total_books_read,
            "total_pages": self.total_pages,
            "average_rating": self.average_rating,
            "average_pages": self.average_pages,
            "recent_books": [_book_summary(book) for book in self.recent_books],
            "top_rated_books": [_book_summary(book) for book in self.top_rated_books],
        }


@dataclass(frozen=True)
class AnnualRecap:
    """
    Year-in-books summary.

    books_by_month holds twelve buckets, January first. peak_month is a
    zero-based index, or None when nothing was finished in the year.
    """

    year: int
    total_books: int = 0
    total_pages: int = 0
    average_rating: Optional[float] = None
    books_with_quotes: int = 0
    books_by_month: Tuple[int, ...] = field(default=(0,) * 12)
    peak_month: Optional[int] = None
    top_book: Optional[Book] = None
    top_author: Optional[AuthorCount] = None
    top_genres: Tuple[GenreCount, ...] = ()
    longest_book: Optional[Book] = None

    @property
    def is_empty(self) -> bool:
        return self.total_books == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "total_books": self.total_books,
            "total_pages": self.total_pages,
            "average_rating": self.average_rating,
            "books_with_quotes": self.books_with_quotes,
            "books_by_month": list(self.books_by_month),
            "peak_month": self.peak_month,
            "top_book": _book_summary(self.top_book),
            "top_author": asdict(self.top_author) if self.top_author else None,
            "top_genres": [asdict(entry) for entry in self.top_genres],
            "longest_book": _book_summary(self.longest_book),
        }


@dataclass(frozen=True)
class FavoritesView:
    top_book: Optional[Book] = None
    top_author: Optional[AuthorCount] = None
    top_genre: Optional[GenreCount] = None
    random_quote: Optional[QuotePick] = None
    highly_rated: Tuple[Book, ...] = ()
    recommended: Tuple[Book, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top_book": _book_summary(self.top_book),
            "top_author": asdict(self.top_author) if self.top_author else None,
            "top_genre": asdict(self.top_genre) if self.top_genre else None,
            "random_quote": asdict(self.random_quote) if self.random_quote else None,
            "highly_rated": [_book_summary(book) for book in self.highly_rated],
            "recommended": [_book_summary(book) for book in self.recommended],
        }


@dataclass(frozen=True)
class GoalConfig:
    """Yearly reading targets; both must be positive"""
    books_target: int
    pages_target: int


@dataclass(frozen=True)
class GoalProgress:
    year: int
    books_read: int
    pages_read: int
    books_target: int
    pages_target: int

    @property
    def books_remaining(self) -> int:
        return max(self.books_target - self.books_read, 0)

    @property
    def pages_remaining(self) -> int:
        return max(self.pages_target - self.pages_read, 0)

    @property
    def is_met(self) -> bool:
        """Either target reached counts as hitting the goal"""
        return self.books_read >= self.books_target or self.pages_read >= self.pages_target

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.update({
            "books_remaining": self.books_remaining,
            "pages_remaining": self.pages_remaining,
            "is_met": self.is_met,
        })
        return data


@dataclass(frozen=True)
class ImportResult:
    """Summary of one committed import batch"""
    added: int = 0
    skipped: int = 0
    stored: Tuple[Book, ...] = ()

    def get_summary(self) -> Dict[str, Any]:
        return {
            "added": self.added,
            "skipped": self.skipped,
            "stored_ids": [book.id for book in self.stored],
        }


@dataclass(frozen=True)
class Dashboard:
    """Every view for one owner and year, computed from one snapshot"""
    owner: str
    year: int
    lifetime: LifetimeStats
    genres: Tuple[GenreCount, ...]
    recap: AnnualRecap
    favorites: FavoritesView
    goal_progress: GoalProgress
    goal_reached_now: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "owner": self.owner,
            "year": self.year,
            "lifetime": self.lifetime.to_dict(),
            "genres": [asdict(entry) for entry in self.genres],
            "recap": self.recap.to_dict(),
            "favorites": self.favorites.to_dict(),
            "goal_progress": self.goal_progress.to_dict(),
            "goal_reached_now": self.goal_reached_now,
        }
