"""
Collection Store implementations.
"""

from .base import CollectionStore
from .memory import InMemoryCollectionStore
from .json_file import JSONFileCollectionStore
from .s3 import S3CollectionStore

__all__ = [
    "CollectionStore",
    "InMemoryCollectionStore",
    "JSONFileCollectionStore",
    "S3CollectionStore",
]
