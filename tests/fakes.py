"""In-memory stand-in for FirestoreRESTClient.

Mirrors the collection/document/query surface the repositories use and
round-trips values through the REST encoding so stored types match what
Firestore returns. Counts reads per collection so tests can tell cache
hits from fetches.
"""

from collections import Counter
from collections.abc import AsyncIterator
from itertools import count
from typing import Any

from hradmin.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    DocumentSnapshot,
)
from hradmin.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_document,
)

ADMIN_PASSWORD = "AdminPassword123!"


class FakeFirestoreClient:
    def __init__(self) -> None:
        self.store: dict[str, dict[str, dict]] = {}
        self.reads: Counter[str] = Counter()
        self.fail_writes: Exception | None = None
        self._ids = count(1)

    def collection(self, collection_id: str) -> "FakeCollection":
        return FakeCollection(self, collection_id)

    async def aclose(self) -> None:
        pass

    def _docs(self, collection_id: str) -> dict[str, dict]:
        return self.store.setdefault(collection_id, {})

    def _check_write(self) -> None:
        if self.fail_writes is not None:
            raise self.fail_writes

    def _snapshot(self, doc_id: str, document: dict) -> DocumentSnapshot:
        return DocumentSnapshot(doc_id, decode_document(document))

    def next_id(self, collection_id: str) -> str:
        return f"{collection_id}-{next(self._ids)}"


class FakeDocument:
    def __init__(self, client: FakeFirestoreClient, collection_id: str, doc_id: str):
        self._client = client
        self._collection_id = collection_id
        self.id = doc_id

    async def update(self, data: dict[str, Any]) -> bool:
        self._client._check_write()
        docs = self._client._docs(self._collection_id)
        if self.id not in docs:
            return False
        docs[self.id]["fields"].update(encode_document(data)["fields"])
        return True

    async def get(self) -> DocumentSnapshot | None:
        self._client.reads[self._collection_id] += 1
        document = self._client._docs(self._collection_id).get(self.id)
        if document is None:
            return None
        return self._client._snapshot(self.id, document)

    async def delete(self) -> None:
        self._client._check_write()
        self._client._docs(self._collection_id).pop(self.id, None)


class FakeQuery:
    def __init__(self, collection: "FakeCollection", field: str, op: str, value: Any):
        if op != "==":
            raise NotImplementedError(op)
        self._collection = collection
        self._field = field
        self._value = value
        self._limit: int | None = None

    def limit(self, n: int) -> "FakeQuery":
        self._limit = n
        return self

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        matched = 0
        async for snapshot in self._collection.stream():
            if snapshot.to_dict().get(self._field) != self._value:
                continue
            yield snapshot
            matched += 1
            if self._limit and matched >= self._limit:
                return


class FakeCollection:
    def __init__(self, client: FakeFirestoreClient, collection_id: str):
        self._client = client
        self.id = collection_id

    def document(self, document_id: str) -> FakeDocument:
        return FakeDocument(self._client, self.id, document_id)

    async def add(self, data: dict[str, Any]) -> FakeDocument:
        self._client._check_write()
        doc = self.document(self._client.next_id(self.id))
        self._client._docs(self.id)[doc.id] = encode_document(data)
        return doc

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        self._client._check_write()
        docs = self._client._docs(self.id)
        if document_id in docs:
            raise DocumentExistsError("Document already exists")
        docs[document_id] = encode_document(data)

    def where(self, field: str, op: str, value: Any) -> FakeQuery:
        return FakeQuery(self, field, op, value)

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        self._client.reads[self.id] += 1
        for doc_id, document in list(self._client._docs(self.id).items()):
            yield self._client._snapshot(doc_id, document)
