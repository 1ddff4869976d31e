"""Firestore-backed employee repository (cached reads)."""

from hradmin.application.dtos.employee import EmployeeResult
from hradmin.infrastructure.firebase.collections import COLLECTION_EMPLOYEES
from hradmin.infrastructure.firebase.repositories._cached_repo import (
    CachedFirestoreRepository,
)


class FirestoreEmployeeRepository(CachedFirestoreRepository[EmployeeResult]):
    """Employees collection. All CRUD comes from the cached base."""

    collection_name = COLLECTION_EMPLOYEES
    resource_type = "employee"
    result_type = EmployeeResult
