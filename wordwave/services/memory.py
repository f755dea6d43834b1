import asyncio
from typing import Any, Dict, List, Mapping, Optional

from ..data import Absent, Found, Lookup, WordRecord
from ..utils import setup_logging
from .store import DocumentStore, StoreUnavailable

logger = setup_logging(__name__)


class MemoryStore(DocumentStore):
    """
    In-process document store for local development and tests.

    Every operation yields to the event loop once before touching the data,
    the way a network round-trip would, so interleavings between concurrent
    coroutines behave like they do against a real database. Setting
    ``available`` to False makes every call fail with StoreUnavailable.
    """

    def __init__(self, documents: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self.documents: Dict[str, Dict[str, Any]] = {
            key: dict(fields) for key, fields in (documents or {}).items()
        }
        self.available = True

    async def _roundtrip(self, operation: str) -> None:
        await asyncio.sleep(0)
        if not self.available:
            raise StoreUnavailable(f"{operation}: memory store is offline")

    def _record(self, key: str) -> WordRecord:
        return WordRecord.from_document({"_id": key, **self.documents[key]})

    async def get(self, key: str) -> Lookup:
        await self._roundtrip("get")
        if key not in self.documents:
            return Absent()
        return Found(self._record(key))

    async def set(self, key: str, fields: Mapping[str, Any]) -> None:
        await self._roundtrip("set")
        self.documents[key] = dict(fields)

    async def update(self, key: str, fields: Mapping[str, Any]) -> None:
        await self._roundtrip("update")
        if key not in self.documents:
            raise StoreUnavailable(f"update: no record at {key!r}")
        self.documents[key].update(fields)

    async def list_all(self) -> List[WordRecord]:
        await self._roundtrip("list_all")
        return [self._record(key) for key in self.documents]

    async def query(
        self, order_by: str, descending: bool = True, limit: Optional[int] = None
    ) -> List[WordRecord]:
        await self._roundtrip("query")
        keys = sorted(
            self.documents,
            key=lambda key: self.documents[key][order_by],
            reverse=descending,
        )
        if limit is not None:
            keys = keys[:limit]
        return [self._record(key) for key in keys]

    async def increment(self, key: str, amount: int = 1) -> None:
        await self._roundtrip("increment")
        document = self.documents.setdefault(key, {"count": 0})
        document["count"] += amount
