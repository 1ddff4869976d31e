"""In-process read cache scoped to the active admin.

Holds whole-collection snapshots and single-record entries fetched from
Firestore. Entries are valid only while an admin scope is active and for
ttl_seconds after they were fetched. Changing the scope drops everything,
so one admin's reads are never served to another.

Runs on the event loop without locks: get_* suspends only while awaiting
fetch_fn. Concurrent misses on the same key each call fetch_fn and the
last one to finish wins. A fetch that finishes after the scope changed is
returned but not stored. A failed fetch writes nothing and is not retried.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from hradmin.shared.telemetry.tracing import add_span_event

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A fetched value and the clock reading at fetch time."""

    value: T
    fetched_at: float


@dataclass(frozen=True)
class CacheStats:
    """Counters and sizes for logging and tests."""

    scope: str | None
    hits: int
    misses: int
    collections: int
    records: int


class ScopedReadCache:
    """TTL cache of collection snapshots and records, tied to one admin scope.

    Create one instance at startup and inject it (no module-level state).
    The clock is injectable so TTL behaviour can be tested without sleeping.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize an empty cache with no active scope.

        Args:
            ttl_seconds: How long an entry stays valid after it was fetched.
            clock: Monotonic time source in seconds.
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got: {ttl_seconds!r}")
        self._ttl = ttl_seconds
        self._clock = clock
        self._scope: str | None = None
        self._collections: dict[str, CacheEntry[list[Any]]] = {}
        self._records: dict[tuple[str, str], CacheEntry[Any]] = {}
        self._hits = 0
        self._misses = 0

    @property
    def scope(self) -> str | None:
        """Return the active scope id, or None when no admin is active."""
        return self._scope

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def set_scope(self, scope_id: str | None) -> None:
        """Make scope_id the active scope.

        A different scope clears every entry before it is recorded. An empty
        or None scope_id always clears and leaves no scope active.
        """
        new_scope = scope_id or None
        if new_scope is None:
            self.invalidate_all()
            if self._scope is not None:
                logger.info("Read cache scope cleared (was %s)", self._scope)
            self._scope = None
            return
        if new_scope != self._scope:
            logger.info(
                "Read cache scope changed from %s to %s, clearing cache",
                self._scope,
                new_scope,
            )
            self.invalidate_all()
            self._scope = new_scope

    def _is_valid(self, entry: CacheEntry[Any] | None) -> bool:
        if entry is None or self._scope is None:
            return False
        return self._clock() - entry.fetched_at < self._ttl

    def _still_scoped(self, scope: str | None) -> bool:
        # A fetch that outlived its scope is returned to its caller but never stored.
        if scope is None:
            return False
        if scope != self._scope:
            logger.debug(
                "Cache SKIP: scope changed from %s to %s during fetch", scope, self._scope
            )
            return False
        return True

    async def get_collection(
        self,
        name: str,
        fetch_fn: Callable[[], Awaitable[list[T]]],
    ) -> list[T]:
        """Return the cached snapshot for name, or fetch and store it.

        Args:
            name: Collection name (e.g. 'employees').
            fetch_fn: Coroutine function returning every record in the collection.

        Returns:
            Ordered list of records. Each call gets its own list, so callers may
            mutate it without touching the snapshot.

        Raises:
            Whatever fetch_fn raises; the cache is left without a snapshot.
        """
        entry = self._collections.get(name)
        if self._is_valid(entry):
            self._hits += 1
            logger.debug("Cache HIT: %s", name)
            add_span_event("cache.hit", {"cache.key": name})
            return list(entry.value)  # type: ignore[union-attr]
        self._misses += 1
        self._collections.pop(name, None)
        logger.debug("Cache MISS: %s", name)
        add_span_event("cache.miss", {"cache.key": name})
        scope = self._scope
        records = await fetch_fn()
        if self._still_scoped(scope):
            self._collections[name] = CacheEntry(list(records), self._clock())
        return records

    async def get_record(
        self,
        collection: str,
        record_id: str,
        fetch_fn: Callable[[], Awaitable[T]],
    ) -> T:
        """Return the cached record for (collection, record_id), or fetch and store it.

        Existence is decided by fetch_fn: it raises ResourceNotFoundException
        for a missing id and nothing is cached for that key.
        """
        key = (collection, record_id)
        entry = self._records.get(key)
        if self._is_valid(entry):
            self._hits += 1
            logger.debug("Cache HIT: %s/%s", collection, record_id)
            add_span_event("cache.hit", {"cache.key": f"{collection}/{record_id}"})
            return entry.value  # type: ignore[union-attr]
        self._misses += 1
        self._records.pop(key, None)
        logger.debug("Cache MISS: %s/%s", collection, record_id)
        add_span_event("cache.miss", {"cache.key": f"{collection}/{record_id}"})
        scope = self._scope
        record = await fetch_fn()
        if self._still_scoped(scope):
            self._records[key] = CacheEntry(record, self._clock())
        return record

    def invalidate_collection(self, name: str) -> None:
        """Drop the snapshot for one collection."""
        if self._collections.pop(name, None) is not None:
            logger.debug("Cache INVALIDATE: %s", name)

    def invalidate_record(self, collection: str, record_id: str) -> None:
        """Drop the entry for one record."""
        if self._records.pop((collection, record_id), None) is not None:
            logger.debug("Cache INVALIDATE: %s/%s", collection, record_id)

    def invalidate_all(self) -> None:
        """Drop every snapshot and record; the scope is unchanged."""
        if self._collections or self._records:
            logger.debug(
                "Cache CLEARED: %s collections, %s records",
                len(self._collections),
                len(self._records),
            )
        self._collections.clear()
        self._records.clear()

    def stats(self) -> CacheStats:
        return CacheStats(
            scope=self._scope,
            hits=self._hits,
            misses=self._misses,
            collections=len(self._collections),
            records=len(self._records),
        )
