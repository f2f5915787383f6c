"""
Collection Store contract.

The core never talks to a storage backend directly; it is handed a store
that owns ids, insertion order and durability.
"""

import uuid
import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from ..models.book import Book


class CollectionStore(ABC):
    """
    Durable home of every user's collection.

    upsert() replaces records whose id already exists, in place, and appends
    the rest. query_all() returns a collection oldest first.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def _load(self, owner: str) -> List[Book]:
        """Return the owner's stored collection in insertion order"""

    @abstractmethod
    def _save(self, owner: str, books: List[Book]) -> None:
        """Replace the owner's stored collection in one write"""

    def query_all(self, owner: str) -> List[Book]:
        return list(self._load(owner))

    def upsert(self, owner: str, records: Sequence[Book]) -> List[Book]:
        """
        Persist a batch of records for one owner.

        Args:
            owner: Collection owner
            records: Books to insert or replace

        Returns:
            The records as persisted, with ids and created_at filled in
        """
        collection = self._load(owner)
        positions = {book.id: i for i, book in enumerate(collection)}
        last_created = max((book.created_at for book in collection if book.created_at), default=None)

        stored = []
        for record in records:
            if record.id in positions:
                index = positions[record.id]
                persisted = replace(record, created_at=collection[index].created_at)
                collection[index] = persisted
            else:
                last_created = self._next_timestamp(last_created)
                persisted = replace(
                    record,
                    id=record.id or str(uuid.uuid4()),
                    created_at=last_created,
                )
                positions[persisted.id] = len(collection)
                collection.append(persisted)
            stored.append(persisted)

        self._save(owner, collection)
        self.logger.info(f"Stored {len(stored)} records for {owner} ({len(collection)} total)")
        return stored

    def _next_timestamp(self, previous: Optional[datetime]) -> datetime:
        """Current UTC time, nudged forward so created_at strictly increases"""
        now = datetime.now(timezone.utc)
        if previous is not None and previous.tzinfo is None:
            previous = previous.replace(tzinfo=timezone.utc)
        if previous is not None and now <= previous:
            return previous + timedelta(microseconds=1)
        return now
