"""
In-memory Collection Store, for tests and throwaway sessions.
"""

from typing import Dict, List

from .base import CollectionStore
from ..models.book import Book


class InMemoryCollectionStore(CollectionStore):
    """Keeps every collection in a dict keyed by owner"""

    def __init__(self):
        super().__init__()
        self._collections: Dict[str, List[Book]] = {}

    def _load(self, owner: str) -> List[Book]:
        return list(self._collections.get(owner, []))

    def _save(self, owner: str, books: List[Book]) -> None:
        self._collections[owner] = list(books)
