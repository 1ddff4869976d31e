"""Domain enumerations for the HR admin application."""

from enum import Enum


class AdminRole(str, Enum):
    """Role stored on an admin document."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    TEST_ADMIN = "test_admin"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid role values as strings."""
        return [role.value for role in cls]


class TransactionType(str, Enum):
    """Direction of a generated bank statement transaction."""

    DEBIT = "debit"
    CREDIT = "credit"
