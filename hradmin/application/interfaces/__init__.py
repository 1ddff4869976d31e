"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from hradmin.infrastructure.
"""

from hradmin.application.interfaces.repositories import (
    IAdminRepository,
    IEmploymentRepository,
    ISalaryHistoryRepository,
)
from hradmin.application.interfaces.services import IReadCacheScope

__all__ = [
    "IAdminRepository",
    "IEmploymentRepository",
    "IReadCacheScope",
    "ISalaryHistoryRepository",
]
