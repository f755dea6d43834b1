"""MongoDB backend for the word counters, on top of pymongo's asyncio client."""
from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable, List, Mapping, Optional, TypeVar

from pymongo import ASCENDING, DESCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from ..data import Absent, Found, Lookup, WordRecord
from ..utils import setup_logging
from .store import DocumentStore, StoreUnavailable

logger = setup_logging(__name__)

T = TypeVar("T")


def translate_errors(
    func: Callable[..., Awaitable[T]]
) -> Callable[..., Awaitable[T]]:
    """Re-raises driver errors as StoreUnavailable."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except PyMongoError as exc:
            raise StoreUnavailable(f"{func.__name__}: {exc}") from exc

    return wrapper


class MongoStore(DocumentStore):
    """
    Stores one document per word in a MongoDB collection, shaped as
    ``{"_id": <word>, "count": <int>}``.
    """

    def __init__(
        self,
        collection: AsyncCollection,
        client: Optional[AsyncMongoClient] = None,
    ):
        self.collection = collection
        self.client = client

    @classmethod
    def from_url(
        cls, url: str, database: str, collection: str, timeout_ms: int = 5000
    ) -> MongoStore:
        """Connects lazily; the first operation performs server selection."""
        client = AsyncMongoClient(url, serverSelectionTimeoutMS=timeout_ms)
        logger.info("Using MongoDB collection %s.%s", database, collection)
        return cls(client[database][collection], client=client)

    @translate_errors
    async def get(self, key: str) -> Lookup:
        document = await self.collection.find_one({"_id": key})
        if document is None:
            return Absent()
        return Found(WordRecord.from_document(document))

    @translate_errors
    async def set(self, key: str, fields: Mapping[str, Any]) -> None:
        await self.collection.replace_one({"_id": key}, dict(fields), upsert=True)

    @translate_errors
    async def update(self, key: str, fields: Mapping[str, Any]) -> None:
        result = await self.collection.update_one({"_id": key}, {"$set": dict(fields)})
        if result.matched_count == 0:
            raise StoreUnavailable(f"update: no record at {key!r}")

    @translate_errors
    async def list_all(self) -> List[WordRecord]:
        documents = await self.collection.find({}).to_list(length=None)
        return [WordRecord.from_document(document) for document in documents]

    @translate_errors
    async def query(
        self, order_by: str, descending: bool = True, limit: Optional[int] = None
    ) -> List[WordRecord]:
        # limit(0) means "no limit" to MongoDB
        if limit == 0:
            return []
        cursor = self.collection.find({}).sort(
            order_by, DESCENDING if descending else ASCENDING
        )
        if limit is not None:
            cursor = cursor.limit(limit)
        documents = await cursor.to_list(length=limit)
        return [WordRecord.from_document(document) for document in documents]

    @translate_errors
    async def increment(self, key: str, amount: int = 1) -> None:
        await self.collection.update_one(
            {"_id": key}, {"$inc": {"count": amount}}, upsert=True
        )

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
            logger.info("Closed MongoDB client")
