"""Repository interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from hradmin.application.dtos.admin import AdminResult
    from hradmin.application.dtos.employment import EmploymentResult
    from hradmin.application.dtos.salary import SalaryHistoryResult


class IAdminRepository(Protocol):
    """Protocol for admin lookup and authentication."""

    async def get_by_id(self, admin_id: str) -> AdminResult | None:
        """Return admin by ID, or None."""

    async def authenticate(self, mobile: str, password: str) -> AdminResult | None:
        """Return the admin if mobile/password match, else None."""


class IEmploymentRepository(Protocol):
    """Protocol for employment reads and writes used by salary revisions."""

    async def get(self, record_id: str) -> EmploymentResult:
        """Return the employment; raise ResourceNotFoundException if missing."""

    async def update(self, record_id: str, data: dict[str, Any]) -> EmploymentResult:
        """Merge fields into the employment and return it."""


class ISalaryHistoryRepository(Protocol):
    """Protocol for salary history storage."""

    async def add(self, employment_id: str, data: dict[str, Any]) -> SalaryHistoryResult:
        """Store a salary revision."""

    async def list_by_employment(self, employment_id: str) -> list[SalaryHistoryResult]:
        """Return revisions for the employment."""
