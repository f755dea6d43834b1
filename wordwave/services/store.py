from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from ..data import Lookup, WordRecord


class StoreError(Exception):
    """Base class for document store failures."""


class StoreUnavailable(StoreError):
    """
    The document store could not serve the request: it is unreachable, it
    denied the operation, or the request itself was invalid (for instance an
    update of a record that does not exist).
    """


class DocumentStore(ABC):
    """
    A named collection of count records keyed by string identifier.

    Implementations raise StoreUnavailable for every failure; a missing record
    on a point read is reported as Absent, never raised.
    """

    @abstractmethod
    async def get(self, key: str) -> Lookup:
        ...

    @abstractmethod
    async def set(self, key: str, fields: Mapping[str, Any]) -> None:
        """Creates or overwrites the record at key."""

    @abstractmethod
    async def update(self, key: str, fields: Mapping[str, Any]) -> None:
        """Partial write. Fails if the record does not exist."""

    @abstractmethod
    async def list_all(self) -> List[WordRecord]:
        ...

    @abstractmethod
    async def query(
        self, order_by: str, descending: bool = True, limit: Optional[int] = None
    ) -> List[WordRecord]:
        ...

    @abstractmethod
    async def increment(self, key: str, amount: int = 1) -> None:
        """Adds amount to the count at key in one server-side step, creating the record if needed."""

    async def close(self) -> None:
        return None
