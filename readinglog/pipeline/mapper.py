"""
Maps Goodreads export rows into canonical Book candidates.
"""

import math
import re
import logging
from dataclasses import asdict
from datetime import datetime, date
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from ..models.book import Book, GENRES, SPINE_PALETTE, STATUS_FINISHED, MAX_RATING
from ..models.export_row import GoodreadsRow

DEFAULT_IMPORT_GENRE = "Fiction"

# Goodreads date formats, most common first
DATE_FORMATS = [
    "%Y/%m/%d",     # 2024/11/28
    "%Y-%m-%d",     # 2024-11-28
    "%m/%d/%Y",     # 11/28/2024
    "%Y/%m",        # 2024/11 (assume first of month)
    "%Y"            # 2024 (assume January 1st)
]


class RecordMapper:
    """
    Turns raw export rows into finished-status Book candidates.

    Rules:
    - only rows with a title on the exact "read" shelf survive; the rest are
      dropped without error
    - the 0-5 star rating becomes 0-10, and 0 stars means "not rated"
    - the export has a single date column, used for both start and end
    - the export carries no compatible genre, so every candidate gets the
      same default genre
    - spine colors cycle through the palette by candidate position
    """

    def __init__(
        self,
        palette: Sequence[str] = SPINE_PALETTE,
        default_genre: str = DEFAULT_IMPORT_GENRE,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not palette:
            raise ValueError("Spine palette must not be empty")
        if default_genre not in GENRES:
            raise ValueError(f"Unknown default genre: {default_genre!r}")
        self.palette = tuple(palette)
        self.default_genre = default_genre
        self.clock = clock or datetime.now
        self.logger = logging.getLogger(self.__class__.__name__)

    def map_rows(
        self,
        rows: Iterable[Dict[str, str]],
        imported_at: Optional[datetime] = None,
    ) -> List[Book]:
        """
        Map header-keyed rows to Book candidates.

        Args:
            rows: Rows from the tabular parser
            imported_at: Timestamp baked into candidate ids (defaults to now)

        Returns:
            Candidates in source order
        """
        typed_rows = [GoodreadsRow.from_record(record) for record in rows]
        importable = [row for row in typed_rows if row.is_importable]

        dropped = len(typed_rows) - len(importable)
        if dropped:
            self.logger.debug(f"Dropped {dropped} rows without a title or not on the read shelf")

        if not importable:
            self.logger.info(f"No importable rows among {len(typed_rows)} parsed")
            return []

        df = pd.DataFrame([asdict(row) for row in importable])
        df["pages"] = pd.to_numeric(df["number_of_pages"], errors="coerce")
        df["stars"] = pd.to_numeric(df["my_rating"], errors="coerce")

        stamp = int((imported_at or self.clock()).timestamp() * 1000)

        candidates = []
        for index, (_, row) in enumerate(df.iterrows()):
            candidates.append(self._row_to_book(row, index, stamp))

        self.logger.info(f"Mapped {len(candidates)} candidates from {len(typed_rows)} rows")
        return candidates

    def _row_to_book(self, row: pd.Series, index: int, stamp: int) -> Book:
        rating = self._scale_rating(row["stars"])
        finished_on = self._parse_date(self._safe_str(row["date_read"]))

        return Book(
            id=f"gr-{stamp}-{index}",
            title=row["title"],
            author=self._safe_str(row["author"]) or "",
            genre=self.default_genre,
            pages=self._safe_pages(row["pages"]),
            isbn=self._clean_isbn(self._safe_str(row["isbn13"])) or self._clean_isbn(self._safe_str(row["isbn"])),
            start_date=finished_on,
            end_date=finished_on,
            rating=rating,
            genre_rating=rating,
            review=self._safe_str(row["my_review"]) or "",
            spine_color=self.palette[index % len(self.palette)],
            status=STATUS_FINISHED,
        )

    def _safe_str(self, value) -> Optional[str]:
        """Safely convert to string, handling NaN"""
        if value is None or pd.isna(value) or value == "":
            return None
        return str(value).strip()

    def _safe_pages(self, value) -> Optional[int]:
        """Page count, or None when missing, unparsable or not positive"""
        if pd.isna(value) or not math.isfinite(value) or value <= 0:
            return None
        return int(value)

    def _scale_rating(self, value) -> Optional[int]:
        """
        Convert 0-5 stars to the 0-10 scale, rounding halves up.

        Zero stars is how the export marks an unrated book, so it maps to
        None rather than 0.
        """
        if pd.isna(value) or not math.isfinite(value):
            return None
        scaled = int(math.floor(float(value) * 2 + 0.5))
        if scaled <= 0 or scaled > MAX_RATING:
            return None
        return scaled

    def _parse_date(self, date_str: Optional[str]) -> Optional[date]:
        """Parse date string to date object"""
        if not date_str:
            return None

        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(date_str, fmt).date()
            except ValueError:
                continue

        self.logger.warning(f"Could not parse date: {date_str}")
        return None

    def _clean_isbn(self, isbn_str: Optional[str]) -> Optional[str]:
        """Clean ISBN from Excel formatting"""
        if not isbn_str:
            return None

        # Remove Excel formula formatting (e.g., ="1234567890")
        clean_isbn = re.sub(r'^="?([0-9X]+)"?$', r"\1", isbn_str)

        # Remove any non-alphanumeric characters except X
        clean_isbn = re.sub(r"[^0-9X]", "", clean_isbn.upper())

        # Validate length (ISBN-10 or ISBN-13)
        if len(clean_isbn) in [10, 13]:
            return clean_isbn

        return None
