"""Cache protocol for the repository layer (DIP)."""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

T = TypeVar("T")


class ReadCacheProtocol(Protocol):
    """Read-through cache used by cached repositories (e.g. ScopedReadCache)."""

    async def get_collection(
        self, name: str, fetch_fn: Callable[[], Awaitable[list[T]]]
    ) -> list[T]:
        """Return cached records for the collection or fetch them."""
        ...

    async def get_record(
        self, collection: str, record_id: str, fetch_fn: Callable[[], Awaitable[T]]
    ) -> T:
        """Return the cached record or fetch it."""
        ...

    def invalidate_collection(self, name: str) -> None:
        """Drop the cached snapshot for the collection."""
        ...

    def invalidate_record(self, collection: str, record_id: str) -> None:
        """Drop the cached record."""
        ...
