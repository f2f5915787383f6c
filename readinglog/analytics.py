"""
Derived views over a collection snapshot.

Every function takes the snapshot in canonical insertion order (oldest
first) and never mutates it. "Finished" includes legacy books with no
status. Frequency tables are ranked by count with ties going to whichever
value was seen first while scanning the snapshot, and rating rankings keep
insertion order among equal ratings.

Empty input never raises: counts are zero, averages are None and lists are
empty.
"""

import random
import logging
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from .models.book import Book
from .models.views import (
    AnnualRecap,
    AuthorCount,
    FavoritesView,
    GenreCount,
    LifetimeStats,
    QuotePick,
)

HIGHLY_RATED_MIN = 9
RECOMMENDED_MIN = 7

logger = logging.getLogger(__name__)


def finished_books(books: Iterable[Book]) -> List[Book]:
    return [book for book in books if book.is_finished]


def finished_in_year(books: Iterable[Book], year: int) -> List[Book]:
    """Finished books whose end date falls in the given year"""
    return [
        book for book in books
        if book.is_finished and book.reading_year == year
    ]


def _rating_key(book: Book) -> int:
    # Unrated books rank below a rating of 0
    return book.rating if book.rating is not None else -1


def rank_by_rating(books: Iterable[Book]) -> List[Book]:
    """Highest rating first; sorted() is stable so ties keep insertion order"""
    return sorted(books, key=_rating_key, reverse=True)


def top_rated_book(books: Sequence[Book]) -> Optional[Book]:
    ranked = rank_by_rating(books)
    if ranked and ranked[0].is_rated:
        return ranked[0]
    return None


def average_rating(books: Sequence[Book]) -> Optional[float]:
    """Mean rating over every given book, unrated counting as 0; None when empty"""
    if not books:
        return None
    return sum(book.rating or 0 for book in books) / len(books)


def total_pages(books: Iterable[Book]) -> int:
    return sum(book.pages or 0 for book in books)


def rank_by_frequency(values: Iterable[str]) -> List[Tuple[str, int]]:
    """
    Count values and rank them by count, descending.

    Counter keeps first-insertion order and most_common() sorts stably, so
    equal counts stay in first-seen order.
    """
    return Counter(values).most_common()


def top_author(books: Iterable[Book]) -> Optional[AuthorCount]:
    ranked = rank_by_frequency(book.author for book in books if book.author)
    if not ranked:
        return None
    author, count = ranked[0]
    return AuthorCount(author=author, count=count)


def genre_breakdown(books: Iterable[Book]) -> List[GenreCount]:
    """Finished books grouped by genre, largest group first"""
    ranked = rank_by_frequency(book.genre for book in finished_books(books))
    return [GenreCount(genre=genre, count=count) for genre, count in ranked]


def lifetime_stats(books: Sequence[Book], recent_count: int = 5, top_count: int = 4) -> LifetimeStats:
    """
    Totals over every finished book.

    Args:
        books: Collection snapshot, oldest first
        recent_count: How many of the most recently added books to return
        top_count: How many of the highest rated books to return
    """
    if recent_count < 0 or top_count < 0:
        raise ValueError("Result sizes must not be negative")

    finished = finished_books(books)
    pages = total_pages(finished)

    return LifetimeStats(
        total_books_read=len(finished),
        total_pages=pages,
        average_rating=average_rating(finished),
        average_pages=pages / len(finished) if finished else None,
        recent_books=tuple(list(reversed(finished))[:recent_count]),
        top_rated_books=tuple(rank_by_rating(finished)[:top_count]),
    )


def monthly_histogram(books: Iterable[Book]) -> List[int]:
    """Twelve buckets of completions by end-date month, January first"""
    buckets = [0] * 12
    for book in books:
        if book.reading_month is not None:
            buckets[book.reading_month] += 1
    return buckets


def annual_recap(books: Sequence[Book], year: int, top_genre_count: int = 3) -> AnnualRecap:
    """
    Summary of one calendar year.

    Only finished books with an end date in the year count; a finished book
    with no end date is left out.
    """
    in_year = finished_in_year(books, year)
    if not in_year:
        return AnnualRecap(year=year)

    buckets = monthly_histogram(in_year)
    with_pages = [book for book in in_year if book.pages is not None]
    genres = genre_breakdown(in_year)

    recap = AnnualRecap(
        year=year,
        total_books=len(in_year),
        total_pages=total_pages(in_year),
        average_rating=average_rating(in_year),
        books_with_quotes=sum(1 for book in in_year if book.has_quotes),
        books_by_month=tuple(buckets),
        peak_month=buckets.index(max(buckets)),
        top_book=top_rated_book(in_year),
        top_author=top_author(in_year),
        top_genres=tuple(genres[:top_genre_count]),
        # max() keeps the first of equal maxima
        longest_book=max(with_pages, key=lambda book: book.pages) if with_pages else None,
    )
    logger.debug(f"Recap {year}: {recap.total_books} books, peak month {recap.peak_month}")
    return recap


def all_quotes(books: Iterable[Book]) -> List[QuotePick]:
    """Every saved passage of every finished book, in snapshot order"""
    return [
        QuotePick(book_title=book.title, quote=quote)
        for book in finished_books(books)
        for quote in book.quote_list
    ]


def favorites(books: Sequence[Book], rng=None) -> FavoritesView:
    """
    Favorites digest over finished books.

    Args:
        books: Collection snapshot, oldest first
        rng: Source of randomness for the quote pick; anything with a
            choice() method. Defaults to the random module.
    """
    rng = rng or random
    finished = finished_books(books)
    ranked = rank_by_rating(finished)
    genres = genre_breakdown(finished)
    quotes = all_quotes(finished)

    return FavoritesView(
        top_book=top_rated_book(finished),
        top_author=top_author(finished),
        top_genre=genres[0] if genres else None,
        random_quote=rng.choice(quotes) if quotes else None,
        highly_rated=tuple(
            book for book in ranked if book.is_rated and book.rating >= HIGHLY_RATED_MIN
        ),
        recommended=tuple(
            book for book in ranked
            if book.recommended_by and book.recommended_by.strip()
            and book.is_rated and book.rating >= RECOMMENDED_MIN
        ),
    )
