"""Application DTOs: read-models returned by repositories and services."""

from hradmin.application.dtos.admin import AdminResult
from hradmin.application.dtos.bank_statement import (
    BankStatementResult,
    BankTransaction,
)
from hradmin.application.dtos.employee import EmployeeResult
from hradmin.application.dtos.employment import EmploymentResult
from hradmin.application.dtos.salary import SalaryComponents, SalaryHistoryResult

__all__ = [
    "AdminResult",
    "BankStatementResult",
    "BankTransaction",
    "EmployeeResult",
    "EmploymentResult",
    "SalaryComponents",
    "SalaryHistoryResult",
]
