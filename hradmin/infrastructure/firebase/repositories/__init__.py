"""Firestore-backed repository implementations."""

from hradmin.infrastructure.firebase.repositories._cached_repo import (
    CachedFirestoreRepository,
)
from hradmin.infrastructure.firebase.repositories.admin_repo_firestore import (
    FirestoreAdminRepository,
)
from hradmin.infrastructure.firebase.repositories.employee_repo_firestore import (
    FirestoreEmployeeRepository,
)
from hradmin.infrastructure.firebase.repositories.employment_repo_firestore import (
    FirestoreEmploymentRepository,
)
from hradmin.infrastructure.firebase.repositories.salary_history_repo_firestore import (
    FirestoreSalaryHistoryRepository,
)

__all__ = [
    "CachedFirestoreRepository",
    "FirestoreAdminRepository",
    "FirestoreEmployeeRepository",
    "FirestoreEmploymentRepository",
    "FirestoreSalaryHistoryRepository",
]
