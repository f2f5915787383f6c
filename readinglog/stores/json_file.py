"""
Collection Store backed by one JSON document per owner on local disk.
"""

import json
import os
from pathlib import Path
from typing import List

from .base import CollectionStore
from ..errors import PersistenceError
from ..models.book import Book


class JSONFileCollectionStore(CollectionStore):
    """
    Stores each owner's collection at <root>/<owner>.json.

    Writes go to a temporary file that is then swapped in, so a failed write
    leaves the previous collection untouched.
    """

    def __init__(self, root: str = "data/collections"):
        super().__init__()
        self.root = Path(root)

    def path_for(self, owner: str) -> Path:
        # Owner names become file names and must stay inside root
        if not owner or owner in (".", "..") or "/" in owner or "\\" in owner:
            raise PersistenceError(f"Invalid owner for a file store: {owner!r}")
        return self.root / f"{owner}.json"

    def _load(self, owner: str) -> List[Book]:
        path = self.path_for(owner)
        if not path.exists():
            return []

        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f)
            return [Book.from_dict(item) for item in document.get("books", [])]
        except (OSError, ValueError) as e:
            self.logger.error(f"Failed to read collection {path}: {e}")
            raise PersistenceError(f"Could not read collection for {owner}") from e

    def _save(self, owner: str, books: List[Book]) -> None:
        path = self.path_for(owner)
        tmp_path = path.with_suffix(".json.tmp")
        document = {
            "owner": owner,
            "books": [book.to_dict() for book in books],
        }

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(document, f, indent=2, ensure_ascii=False, default=str)
            os.replace(tmp_path, path)
        except OSError as e:
            self.logger.error(f"Failed to write collection {path}: {e}")
            raise PersistenceError(f"Could not write collection for {owner}") from e
