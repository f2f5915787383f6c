"""
Collection Store backed by one JSON object per owner in an S3 bucket.
"""

import json
from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .base import CollectionStore
from ..errors import PersistenceError
from ..models.book import Book


class S3CollectionStore(CollectionStore):
    """
    Keeps collections at s3://<bucket>/<prefix><owner>.json.

    A single put_object per batch means a batch is either fully written or
    not written at all.
    """

    def __init__(self, bucket: str, prefix: str = "collections/", s3_client=None):
        super().__init__()
        self.bucket = bucket
        self.prefix = prefix
        self.s3_client = s3_client or boto3.client('s3')

    def key_for(self, owner: str) -> str:
        return f"{self.prefix}{owner}.json"

    def _load(self, owner: str) -> List[Book]:
        key = self.key_for(owner)
        try:
            obj = self.s3_client.get_object(Bucket=self.bucket, Key=key)
            document = json.loads(obj['Body'].read().decode('utf-8'))
        except ClientError as e:
            if self._is_missing(e):
                return []
            self.logger.error(f"Failed to read s3://{self.bucket}/{key}: {e}")
            raise PersistenceError(f"Could not read collection for {owner}") from e
        except (BotoCoreError, ValueError) as e:
            self.logger.error(f"Failed to read s3://{self.bucket}/{key}: {e}")
            raise PersistenceError(f"Could not read collection for {owner}") from e

        return [Book.from_dict(item) for item in document.get("books", [])]

    def _save(self, owner: str, books: List[Book]) -> None:
        key = self.key_for(owner)
        document = {
            "owner": owner,
            "books": [book.to_dict() for book in books],
        }

        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=json.dumps(document, default=str),
                ContentType='application/json'
            )
        except (BotoCoreError, ClientError) as e:
            self.logger.error(f"Failed to write s3://{self.bucket}/{key}: {e}")
            raise PersistenceError(f"Could not write collection for {owner}") from e

    @staticmethod
    def _is_missing(error: ClientError) -> bool:
        code: Optional[str] = error.response.get('Error', {}).get('Code')
        return code in ('NoSuchKey', '404')
