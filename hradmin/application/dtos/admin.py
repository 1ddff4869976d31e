"""DTOs for admin authentication (no password hash)."""

from dataclasses import dataclass

from hradmin.domain.enums import AdminRole


@dataclass(frozen=True)
class AdminResult:
    """Authenticated admin. The password hash never leaves the repository."""

    id: str
    name: str
    mobile: str
    role: AdminRole
