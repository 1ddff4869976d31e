"""Employment API schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from hradmin.core.constants import DEFAULT_SALARY_CREDIT_DATE
from hradmin.schemas.salary import SalaryComponentsFields


class EmploymentFields(SalaryComponentsFields):
    """Editable employment fields (all optional; used for partial updates)."""

    employee_id: str | None = Field(default=None, min_length=1)
    employment_id: str | None = Field(default=None, max_length=64)
    job_title: str | None = Field(default=None, max_length=200)
    department: str | None = Field(default=None, max_length=200)
    location: str | None = Field(default=None, max_length=200)
    reporting_manager: str | None = Field(default=None, max_length=200)
    employment_type: str | None = Field(default=None, max_length=32)
    work_schedule: str | None = Field(default=None, max_length=100)
    contract_type: str | None = Field(default=None, max_length=32)
    joining_date: date | None = None
    increment_date: date | None = None
    start_date: date | None = None
    end_date: date | None = None
    payment_frequency: str | None = Field(default=None, max_length=32)
    payment_mode: str | None = Field(default=None, max_length=32)
    is_it: bool | None = None
    is_resignation: bool | None = None
    salary: float | None = Field(default=None, ge=0)
    ctc: float | None = Field(default=None, ge=0)
    in_hand_ctc: float | None = Field(default=None, ge=0)
    relieving_ctc: float | None = Field(default=None, ge=0)
    salary_id: str | None = Field(default=None, max_length=64)
    salary_per_month: float | None = Field(default=None, ge=0)


class EmploymentCreateRequest(EmploymentFields):
    """Request body for creating an employment (defaults as the add-employment form)."""

    employee_id: str = Field(..., min_length=1)
    employment_type: str = Field(default="full-time", max_length=32)
    payment_frequency: str = Field(default="monthly", max_length=32)
    payment_mode: str = Field(default="bank-transfer", max_length=32)
    is_it: bool = True
    is_resignation: bool = False
    payable_days: float = Field(default=30, ge=0, le=31)
    total_leaves: float = Field(default=24, ge=0)
    salary_credit_date: str = Field(default=DEFAULT_SALARY_CREDIT_DATE, max_length=100)


class EmploymentUpdate(EmploymentFields):
    """Request body for updating an employment (partial)."""


class EmploymentResponse(BaseModel):
    """Employment as stored (job details and current salary breakdown)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    employee_id: str
    employment_id: str | None = None
    job_title: str | None = None
    department: str | None = None
    location: str | None = None
    reporting_manager: str | None = None
    employment_type: str | None = None
    work_schedule: str | None = None
    contract_type: str | None = None
    joining_date: str | None = None
    increment_date: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    payment_frequency: str | None = None
    payment_mode: str | None = None
    is_it: bool | None = None
    is_resignation: bool | None = None
    salary: float | None = None
    ctc: float | None = None
    in_hand_ctc: float | None = None
    relieving_ctc: float | None = None
    salary_id: str | None = None
    salary_per_month: float | None = None
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
