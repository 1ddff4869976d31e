"""Firestore REST v1 client used by the repositories (no firebase-admin).

Service account tokens come from google-auth; requests go through one
shared httpx.AsyncClient. The surface mirrors the parts of the Firestore
SDK that hradmin needs: collection listing, equality queries, documents
by id, auto-id adds, partial updates and deletes.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import httpx

from hradmin.infrastructure.firebase._rest_encoding import (
    _encode_value,
    decode_document,
    encode_document,
)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"
_LIST_PAGE_SIZE = 300

Params = list[tuple[str, str]]


def service_account_credentials(key_dict: dict):
    """Return google-auth service account credentials scoped to Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _refresh_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


def _last_segment(name: str) -> str:
    return name.rsplit("/", 1)[-1] if name else ""


class DocumentExistsError(Exception):
    """Raised when a document is created under an id that is already taken (409)."""


class DocumentSnapshot:
    """Document id plus its decoded fields."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    @classmethod
    def from_rest(cls, document: dict) -> DocumentSnapshot:
        return cls(_last_segment(document.get("name", "")), decode_document(document))

    def to_dict(self) -> dict:
        return self._data


class DocumentReference:
    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return _last_segment(self._path)

    async def get(self) -> DocumentSnapshot | None:
        """Return the document, or None when it does not exist."""
        out = await self._client.request("GET", self._path)
        return DocumentSnapshot.from_rest(out) if out else None

    async def update(self, data: dict[str, Any]) -> bool:
        """Write only the given fields of an existing document.

        Returns False (and writes nothing) when the document does not exist.
        """
        params: Params = [("updateMask.fieldPaths", key) for key in data]
        params.append(("currentDocument.exists", "true"))
        out = await self._client.request(
            "PATCH", self._path, body=encode_document(data), params=params
        )
        return out is not None

    async def delete(self) -> None:
        """Delete the document; a missing document is not an error."""
        await self._client.request("DELETE", self._path)


class Query:
    """Single equality/comparison filter on one collection, run via runQuery."""

    _OPERATORS = {
        "==": "EQUAL",
        "!=": "NOT_EQUAL",
        "<": "LESS_THAN",
        "<=": "LESS_THAN_OR_EQUAL",
        ">": "GREATER_THAN",
        ">=": "GREATER_THAN_OR_EQUAL",
    }

    def __init__(
        self,
        client: FirestoreRESTClient,
        collection_path: str,
        field: str,
        op: str,
        value: Any,
    ):
        if op not in self._OPERATORS:
            raise ValueError(f"Unsupported query operator: {op!r}")
        self._client = client
        self._parent, self._collection_id = collection_path.rsplit("/", 1)
        self._filter = {
            "fieldFilter": {
                "field": {"fieldPath": field},
                "op": self._OPERATORS[op],
                "value": _encode_value(value),
            }
        }
        self._limit: int | None = None

    def limit(self, n: int) -> Query:
        self._limit = n
        return self

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        query: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
            "where": self._filter,
        }
        if self._limit:
            query["limit"] = self._limit
        out = await self._client.request(
            "POST", f"{self._parent}:runQuery", body={"structuredQuery": query}
        )
        # runQuery answers with a list; entries without "document" carry only read metadata.
        for item in out or []:
            if "document" in item:
                yield DocumentSnapshot.from_rest(item["document"])


class CollectionReference:
    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path.rstrip("/")

    @property
    def id(self) -> str:
        return _last_segment(self._path)

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    def where(self, field: str, op: str, value: Any) -> Query:
        """Filter the collection; chain .limit() and iterate .stream()."""
        return Query(self._client, self._path, field, op, value)

    async def add(self, data: dict[str, Any]) -> DocumentReference:
        """Create a document under a Firestore-assigned id."""
        out = await self._client.request("POST", self._path, body=encode_document(data))
        return self.document(_last_segment((out or {}).get("name", "")))

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        """Create a document under document_id.

        Raises:
            DocumentExistsError: If the id is already taken.
        """
        await self._client.request(
            "POST",
            self._path,
            body=encode_document(data),
            params=[("documentId", document_id)],
        )

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Yield every document in the collection, page by page."""
        params: Params = [("pageSize", str(_LIST_PAGE_SIZE))]
        while True:
            out = await self._client.request("GET", self._path, params=params)
            if not out:
                return
            for document in out.get("documents", []):
                yield DocumentSnapshot.from_rest(document)
            token = out.get("nextPageToken")
            if not token:
                return
            params = [("pageSize", str(_LIST_PAGE_SIZE)), ("pageToken", token)]


class FirestoreRESTClient:
    """Entry point: one per process, created at startup and closed at shutdown."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._credentials = credentials
        self._root = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client or httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._root}/{collection_id}")

    async def get_token(self) -> str:
        """Return a valid access token; refreshing blocks, so it runs in a thread."""
        return await asyncio.to_thread(_refresh_token, self._credentials)

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: dict | None = None,
        params: Params | None = None,
    ) -> Any:
        """Call the REST API for a resource path below /v1.

        Returns the decoded JSON body ({} when empty) or None on 404.

        Raises:
            DocumentExistsError: On 409.
            httpx.HTTPStatusError: On any other non-2xx response.
        """
        resp = await self._http.request(
            method,
            f"{_BASE}/{path}",
            json=body,
            params=params,
            headers={"Authorization": f"Bearer {await self.get_token()}"},
        )
        if resp.status_code == 404:
            return None
        if resp.status_code == 409:
            raise DocumentExistsError(f"Document already exists: {path}")
        resp.raise_for_status()
        return resp.json() if resp.content else {}

    async def aclose(self) -> None:
        """Close the HTTP client unless it was injected by the caller."""
        if self._owns_http:
            await self._http.aclose()
