"""DTOs for employee use cases."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class EmployeeResult:
    """Employee read-model as stored in the employees collection."""

    id: str
    name: str = ""
    employee_id: str | None = None
    email: str | None = None
    phone: str | None = None
    position: str | None = None
    department: str | None = None
    status: str | None = None
    join_date: str | None = None
    date_of_birth: str | None = None
    current_address: str | None = None
    permanent_address: str | None = None
    pan_card: str | None = None
    aadhar_card: str | None = None
    voter_id: str | None = None
    driving_license: str | None = None
    bank_name: str | None = None
    account_no: str | None = None
    account_holder_name: str | None = None
    ifsc_code: str | None = None
    tenth_standard: dict[str, Any] | None = None
    twelth_standard: dict[str, Any] | None = None
    graduation: dict[str, Any] | None = None
    other_education: dict[str, Any] | None = None
