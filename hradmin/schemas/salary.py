"""Salary components and salary history API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class SalaryComponentsFields(BaseModel):
    """Monthly salary breakdown (all optional; amounts are non-negative)."""

    basic: float | None = Field(default=None, ge=0)
    da: float | None = Field(default=None, ge=0)
    hra: float | None = Field(default=None, ge=0)
    pf: float | None = Field(default=None, ge=0)
    medical_allowance: float | None = Field(default=None, ge=0)
    transport: float | None = Field(default=None, ge=0)
    gratuity: float | None = Field(default=None, ge=0)
    total_leaves: float | None = Field(default=None, ge=0)
    salary_credit_date: str | None = Field(default=None, max_length=100)
    salary_credited_amount: float | None = Field(default=None, ge=0)
    payable_days: float | None = Field(default=None, ge=0, le=31)
    additional_allowance: float | None = Field(default=None, ge=0)
    special_allowance: float | None = Field(default=None, ge=0)
    education_allowance: float | None = Field(default=None, ge=0)
    monthly_reimbursement: float | None = Field(default=None, ge=0)
    lta: float | None = Field(default=None, ge=0)
    statutory_bonus: float | None = Field(default=None, ge=0)
    health_insurance: float | None = Field(default=None, ge=0)
    employer_pf: float | None = Field(default=None, ge=0)


class SalaryHistoryCreateRequest(SalaryComponentsFields):
    """Request body for adding a salary revision to an employment."""

    basic: float = Field(..., ge=0, description="Basic salary is required")
    effective_date: date | None = Field(default=None)
    note: str | None = Field(default=None, max_length=500)


class SalaryHistoryResponse(SalaryComponentsFields):
    """One salary revision."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    employment_id: str
    effective_date: str | None = None
    note: str | None = None
    created_at: datetime | None = None
