"""Employee API schemas."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class EmployeeFields(BaseModel):
    """Editable employee fields (all optional; used for partial updates)."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    employee_id: str | None = Field(default=None, max_length=64)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=20)
    position: str | None = Field(default=None, max_length=200)
    department: str | None = Field(default=None, max_length=200)
    status: str | None = Field(default=None, max_length=32)
    join_date: date | None = None
    date_of_birth: date | None = None
    current_address: str | None = Field(default=None, max_length=1000)
    permanent_address: str | None = Field(default=None, max_length=1000)
    pan_card: str | None = Field(default=None, max_length=20)
    aadhar_card: str | None = Field(default=None, max_length=20)
    voter_id: str | None = Field(default=None, max_length=32)
    driving_license: str | None = Field(default=None, max_length=32)
    bank_name: str | None = Field(default=None, max_length=200)
    account_no: str | None = Field(default=None, max_length=34)
    account_holder_name: str | None = Field(default=None, max_length=200)
    ifsc_code: str | None = Field(default=None, max_length=11)
    tenth_standard: dict[str, Any] | None = None
    twelth_standard: dict[str, Any] | None = None
    graduation: dict[str, Any] | None = None
    other_education: dict[str, Any] | None = None


class EmployeeCreateRequest(EmployeeFields):
    """Request body for creating an employee."""

    name: str = Field(..., min_length=1, max_length=200)
    status: str = Field(default="active", max_length=32)


class EmployeeUpdate(EmployeeFields):
    """Request body for updating an employee (partial)."""


class EmployeeResponse(BaseModel):
    """Employee as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
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
