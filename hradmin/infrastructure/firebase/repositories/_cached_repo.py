"""Base for Firestore repositories whose reads go through the scoped read cache.

Every write is followed, in the same method, by the cache invalidation it
requires: creates drop the collection snapshot; updates and deletes drop
the snapshot and the record entry. Invalidation runs only after the remote
write succeeded, so a failed write leaves the cache as it was.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

from hradmin.domain.exceptions import ResourceNotFoundException
from hradmin.infrastructure.cache.cache_protocol import ReadCacheProtocol
from hradmin.infrastructure.firebase._rest_client import FirestoreRESTClient
from hradmin.infrastructure.firebase.repositories._mapping import (
    from_document,
    to_document,
)
from hradmin.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)

R = TypeVar("R")


class CachedFirestoreRepository(Generic[R]):
    """CRUD over one collection with read-through caching.

    Subclasses set collection_name, resource_type and result_type.
    """

    collection_name: ClassVar[str]
    resource_type: ClassVar[str]
    result_type: ClassVar[type]

    def __init__(self, client: FirestoreRESTClient, cache: ReadCacheProtocol) -> None:
        self._client = client
        self._cache = cache
        self._coll = client.collection(self.collection_name)

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> R:
        return from_document(self.result_type, doc_id, data)

    async def _fetch_all(self) -> list[R]:
        logger.debug("Fetching %s from Firestore", self.collection_name)
        return [
            self._to_result(snapshot.id, snapshot.to_dict())
            async for snapshot in self._coll.stream()
        ]

    async def _fetch_one(self, record_id: str) -> R:
        logger.debug("Fetching %s %s from Firestore", self.resource_type, record_id)
        doc = await self._coll.document(record_id).get()
        if doc is None:
            raise ResourceNotFoundException(self.resource_type, record_id)
        return self._to_result(doc.id, doc.to_dict())

    @traced()
    async def list_all(self) -> list[R]:
        """Return every record in the collection (cached)."""
        return await self._cache.get_collection(self.collection_name, self._fetch_all)

    @traced()
    async def get(self, record_id: str) -> R:
        """Return one record (cached).

        Raises:
            ResourceNotFoundException: If no document has this id.
        """
        return await self._cache.get_record(
            self.collection_name, record_id, lambda: self._fetch_one(record_id)
        )

    async def create(self, data: dict[str, Any]) -> R:
        """Add a document with a server-assigned id; invalidate the collection snapshot."""
        document = to_document(data)
        ref = await self._coll.add(document)
        self._cache.invalidate_collection(self.collection_name)
        logger.info("Created %s %s", self.resource_type, ref.id)
        return self._to_result(ref.id, document)

    async def update(self, record_id: str, data: dict[str, Any]) -> R:
        """Merge fields into an existing document; invalidate snapshot and record.

        Returns the record as re-read after the write.

        Raises:
            ResourceNotFoundException: If no document has this id (nothing is invalidated).
        """
        updated = await self._coll.document(record_id).update(to_document(data))
        if not updated:
            raise ResourceNotFoundException(self.resource_type, record_id)
        self._invalidate(record_id)
        logger.info("Updated %s %s", self.resource_type, record_id)
        return await self.get(record_id)

    async def delete(self, record_id: str) -> None:
        """Delete the document (idempotent); invalidate snapshot and record."""
        await self._coll.document(record_id).delete()
        self._invalidate(record_id)
        logger.info("Deleted %s %s", self.resource_type, record_id)

    def _invalidate(self, record_id: str) -> None:
        self._cache.invalidate_collection(self.collection_name)
        self._cache.invalidate_record(self.collection_name, record_id)
