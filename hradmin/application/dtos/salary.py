"""DTOs for salary components and salary history (no dependency on Firestore)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class SalaryComponents:
    """Monthly salary breakdown shared by employments and salary history entries."""

    basic: float | None = None
    da: float | None = None
    hra: float | None = None
    pf: float | None = None
    medical_allowance: float | None = None
    transport: float | None = None
    gratuity: float | None = None
    total_leaves: float | None = None
    salary_credit_date: str | None = None
    salary_credited_amount: float | None = None
    payable_days: float | None = None
    additional_allowance: float | None = None
    special_allowance: float | None = None
    education_allowance: float | None = None
    monthly_reimbursement: float | None = None
    lta: float | None = None
    statutory_bonus: float | None = None
    health_insurance: float | None = None
    employer_pf: float | None = None


@dataclass(frozen=True, kw_only=True)
class SalaryHistoryResult(SalaryComponents):
    """One salary revision recorded against an employment."""

    id: str
    employment_id: str
    effective_date: str | None = None
    note: str | None = None
    created_at: datetime | None = None
