"""Firestore-backed salary history repository (not cached)."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

from hradmin.application.dtos.salary import SalaryHistoryResult
from hradmin.infrastructure.firebase._rest_client import FirestoreRESTClient
from hradmin.infrastructure.firebase.collections import COLLECTION_SALARY_HISTORY
from hradmin.infrastructure.firebase.repositories._mapping import (
    document_key,
    from_document,
    to_document,
)
from hradmin.shared.telemetry.tracing import traced
from hradmin.shared.utils.datetime import ensure_utc, parse_iso_date, utc_now
from hradmin.shared.utils.generators import generate_cuid

_OLDEST = datetime.min.replace(tzinfo=UTC)


def _revision_order(entry: SalaryHistoryResult) -> tuple[date, datetime]:
    """Sort key: effective date, then creation time for revisions on the same date."""
    return (
        parse_iso_date(entry.effective_date) or date.min,
        ensure_utc(entry.created_at) or _OLDEST,
    )


class FirestoreSalaryHistoryRepository:
    """Salary revisions keyed by employment. Reads always hit Firestore."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_SALARY_HISTORY)

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> SalaryHistoryResult:
        return from_document(SalaryHistoryResult, doc_id, data)

    async def add(self, employment_id: str, data: dict[str, Any]) -> SalaryHistoryResult:
        """Record a salary revision for the employment; return the stored entry."""
        entry_id = generate_cuid()
        document = to_document(
            {**data, "employment_id": employment_id, "created_at": utc_now()}
        )
        await self._coll.create(entry_id, document)
        return self._to_result(entry_id, document)

    @traced()
    async def list_by_employment(self, employment_id: str) -> list[SalaryHistoryResult]:
        """Return revisions for the employment, newest effective date first."""
        q = self._coll.where(document_key("employment_id"), "==", employment_id)
        entries = [
            self._to_result(snapshot.id, snapshot.to_dict())
            async for snapshot in q.stream()
        ]
        return sorted(entries, key=_revision_order, reverse=True)
