"""Application services: sessions, salary revisions, bank statement data."""

from hradmin.application.services.bank_statement import generate_transactions
from hradmin.application.services.salary_service import SalaryService
from hradmin.application.services.session_service import LoginResult, SessionService

__all__ = [
    "LoginResult",
    "SalaryService",
    "SessionService",
    "generate_transactions",
]
