"""DTOs for employment use cases."""

from dataclasses import dataclass

from hradmin.application.dtos.salary import SalaryComponents


@dataclass(frozen=True, kw_only=True)
class EmploymentResult(SalaryComponents):
    """Employment read-model: job details plus the current salary breakdown."""

    id: str
    employee_id: str = ""
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
