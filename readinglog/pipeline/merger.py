"""
Merges import candidates into an existing collection.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..errors import PersistenceError, ReadingLogError
from ..models.book import Book, MergePlan
from ..models.views import ImportResult
from ..stores.base import CollectionStore
from .mapper import RecordMapper
from .tabular import parse_table

NaturalKey = Tuple[str, str, Optional[str]]


def natural_key(book: Book) -> NaturalKey:
    """Content identity of an imported book: (title, author, end date)"""
    return (
        book.title.strip().casefold(),
        (book.author or "").strip().casefold(),
        book.end_date.isoformat() if book.end_date else None,
    )


class ImportMerger:
    """
    Decides which candidates of a batch are new and persists them together.

    Existing records are never overwritten by an import: a candidate whose id
    is already stored is skipped. By default every candidate id is fresh, so
    importing the same file twice stores every book twice. With dedupe=True a
    candidate is also skipped when its natural key matches a stored record or
    an earlier candidate of the same batch.
    """

    def __init__(self, store: CollectionStore, dedupe: bool = False):
        self.store = store
        self.dedupe = dedupe
        self.logger = logging.getLogger(self.__class__.__name__)

    def plan(self, candidates: Iterable[Book], existing: Sequence[Book]) -> MergePlan:
        """Split candidates into those to persist and those to skip"""
        known_ids: Set[str] = {book.id for book in existing if book.id}
        known_keys: Set[NaturalKey] = {natural_key(book) for book in existing} if self.dedupe else set()

        merge_plan = MergePlan()
        for candidate in candidates:
            if candidate.id and candidate.id in known_ids:
                merge_plan.skipped.append(candidate)
                continue

            if self.dedupe:
                key = natural_key(candidate)
                if key in known_keys:
                    merge_plan.skipped.append(candidate)
                    continue
                known_keys.add(key)

            if candidate.id:
                known_ids.add(candidate.id)
            merge_plan.to_persist.append(candidate)

        return merge_plan

    def commit(self, owner: str, candidates: List[Book]) -> ImportResult:
        """
        Merge a batch against the owner's collection and persist it in one call.

        Raises:
            PersistenceError: if the store fails to load or write; the batch
                is reported as a whole, with no retry
        """
        try:
            existing = self.store.query_all(owner)
            merge_plan = self.plan(candidates, existing)

            stored: List[Book] = []
            if merge_plan.to_persist:
                stored = self.store.upsert(owner, merge_plan.to_persist)
        except ReadingLogError:
            raise
        except Exception as e:
            self.logger.error(f"Import batch for {owner} failed: {e}")
            raise PersistenceError(f"Import batch of {len(candidates)} books failed") from e

        self.logger.info(
            f"Import for {owner}: {len(stored)} added, {len(merge_plan.skipped)} skipped"
        )
        return ImportResult(
            added=len(stored),
            skipped=len(merge_plan.skipped),
            stored=tuple(stored),
        )

    def import_text(self, owner: str, text: str, mapper: Optional[RecordMapper] = None) -> ImportResult:
        """
        Parse, map and commit a whole export file.

        Parsing and mapping finish before the store is touched, so a
        ParseError leaves the collection unchanged.
        """
        mapper = mapper or RecordMapper()
        candidates = mapper.map_rows(parse_table(text))
        return self.commit(owner, candidates)
