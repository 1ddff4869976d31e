"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from hradmin.domain.enums import AdminRole, TransactionType
from hradmin.domain.exceptions import (
    AdminAlreadyExistsException,
    AuthenticationException,
    HRAdminException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "AdminRole",
    "TransactionType",
    # Exceptions
    "AdminAlreadyExistsException",
    "AuthenticationException",
    "HRAdminException",
    "ResourceNotFoundException",
    "ValidationException",
]
