from dataclasses import dataclass, field
from typing import List, Optional

from ..data import Found, WordRecord
from ..utils import BadParameter, handle_errors, process_time, setup_logging
from .store import DocumentStore

logger = setup_logging(__name__)

DEFAULT_TRENDING_LIMIT = 5
MAX_TRENDING_LIMIT = 1000


def normalize(word: str) -> str:
    """Case-folds a submitted word into its record key."""
    return word.lower()


@dataclass
class WordCounter:
    """
    Counts word submissions in a document store.

    By default an occurrence is recorded as read, then create or update.
    Concurrent submissions of the same word can therefore lose increments.
    With ``atomic=True`` the store performs the increment in a single
    server-side step instead.
    """

    store: DocumentStore
    atomic: bool = field(default=False)
    trending_limit: int = field(default=DEFAULT_TRENDING_LIMIT)

    @process_time
    @handle_errors
    async def record_occurrence(self, word: str) -> None:
        key = normalize(word)
        if self.atomic:
            await self.store.increment(key, 1)
            logger.info("Incremented %r atomically", key)
            return
        lookup = await self.store.get(key)
        if isinstance(lookup, Found):
            count = lookup.record.count + 1
            await self.store.update(key, {"count": count})
        else:
            count = 1
            await self.store.set(key, {"count": count})
        logger.info("Recorded %r, count is now %s", key, count)

    @process_time
    @handle_errors
    async def fetch_all(self) -> List[WordRecord]:
        """Every record, in whatever order the store enumerates them."""
        return await self.store.list_all()

    @process_time
    @handle_errors
    async def fetch_top(self, n: Optional[int] = None) -> List[WordRecord]:
        """
        The ``n`` most submitted words, highest count first. Ties come back in
        the store's own order, which is unspecified.
        """
        if n is None:
            n = self.trending_limit
        if n < 0:
            raise BadParameter(f"n must be non-negative, got {n}")
        if n > MAX_TRENDING_LIMIT:
            raise BadParameter(f"n must be at most {MAX_TRENDING_LIMIT}, got {n}")
        if n == 0:
            return []
        return await self.store.query("count", descending=True, limit=n)
