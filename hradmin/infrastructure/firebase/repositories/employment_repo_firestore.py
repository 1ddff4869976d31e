"""Firestore-backed employment repository (cached reads, uncached per-employee query)."""

from hradmin.application.dtos.employment import EmploymentResult
from hradmin.infrastructure.firebase.collections import COLLECTION_EMPLOYMENTS
from hradmin.infrastructure.firebase.repositories._cached_repo import (
    CachedFirestoreRepository,
)
from hradmin.infrastructure.firebase.repositories._mapping import document_key
from hradmin.shared.telemetry.tracing import traced


class FirestoreEmploymentRepository(CachedFirestoreRepository[EmploymentResult]):
    """Employments collection."""

    collection_name = COLLECTION_EMPLOYMENTS
    resource_type = "employment"
    result_type = EmploymentResult

    @traced()
    async def list_by_employee(self, employee_id: str) -> list[EmploymentResult]:
        """Return employments for one employee. Always queries Firestore (not cached)."""
        q = self._coll.where(document_key("employee_id"), "==", employee_id)
        return [
            self._to_result(snapshot.id, snapshot.to_dict())
            async for snapshot in q.stream()
        ]
