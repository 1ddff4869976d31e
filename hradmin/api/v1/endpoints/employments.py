"""Employment API: cached employment CRUD and salary history."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from hradmin.api.v1.dependencies import (
    CurrentAdmin,
    get_employee_repo,
    get_employment_repo,
    get_salary_service,
)
from hradmin.application.services.salary_service import SalaryService
from hradmin.core.limiter import limit_writes
from hradmin.domain.exceptions import ValidationException
from hradmin.infrastructure.firebase.repositories import (
    FirestoreEmployeeRepository,
    FirestoreEmploymentRepository,
)
from hradmin.schemas.employment import (
    EmploymentCreateRequest,
    EmploymentResponse,
    EmploymentUpdate,
)
from hradmin.schemas.salary import SalaryHistoryCreateRequest, SalaryHistoryResponse

router = APIRouter()

EmploymentRepo = Annotated[FirestoreEmploymentRepository, Depends(get_employment_repo)]
EmployeeRepo = Annotated[FirestoreEmployeeRepository, Depends(get_employee_repo)]
SalarySvc = Annotated[SalaryService, Depends(get_salary_service)]


@router.get("", response_model=list[EmploymentResponse])
async def list_employments(current_admin: CurrentAdmin, repo: EmploymentRepo):
    """List all employments (served from the read cache within its TTL)."""
    return [EmploymentResponse.model_validate(e) for e in await repo.list_all()]


@router.post("", response_model=EmploymentResponse, status_code=201)
@limit_writes
async def create_employment(
    request: Request,
    body: EmploymentCreateRequest,
    current_admin: CurrentAdmin,
    repo: EmploymentRepo,
    employee_repo: EmployeeRepo,
):
    """Create an employment for an existing employee (404 if the employee is missing)."""
    await employee_repo.get(body.employee_id)
    created = await repo.create(body.model_dump(exclude_none=True))
    return EmploymentResponse.model_validate(created)


@router.get("/{employment_id}", response_model=EmploymentResponse)
async def get_employment(employment_id: str, current_admin: CurrentAdmin, repo: EmploymentRepo):
    """Get an employment by id (404 if missing)."""
    return EmploymentResponse.model_validate(await repo.get(employment_id))


@router.put("/{employment_id}", response_model=EmploymentResponse)
@limit_writes
async def update_employment(
    request: Request,
    employment_id: str,
    body: EmploymentUpdate,
    current_admin: CurrentAdmin,
    repo: EmploymentRepo,
):
    """Update the given employment fields (partial)."""
    data = body.model_dump(exclude_unset=True)
    if not data:
        raise ValidationException("At least one field is required")
    return EmploymentResponse.model_validate(await repo.update(employment_id, data))


@router.delete("/{employment_id}", status_code=204)
@limit_writes
async def delete_employment(
    request: Request,
    employment_id: str,
    current_admin: CurrentAdmin,
    repo: EmploymentRepo,
) -> Response:
    """Delete an employment. Deleting a missing id is a no-op."""
    await repo.delete(employment_id)
    return Response(status_code=204)


@router.get("/{employment_id}/salary-history", response_model=list[SalaryHistoryResponse])
async def list_salary_history(
    employment_id: str, current_admin: CurrentAdmin, salary_svc: SalarySvc
):
    """List salary revisions of the employment, newest first."""
    entries = await salary_svc.list_revisions(employment_id)
    return [SalaryHistoryResponse.model_validate(e) for e in entries]


@router.post(
    "/{employment_id}/salary-history",
    response_model=SalaryHistoryResponse,
    status_code=201,
)
@limit_writes
async def add_salary_history(
    request: Request,
    employment_id: str,
    body: SalaryHistoryCreateRequest,
    current_admin: CurrentAdmin,
    salary_svc: SalarySvc,
):
    """Add a salary revision; the employment's salary fields are updated to match."""
    entry = await salary_svc.add_revision(employment_id, body.model_dump(exclude_none=True))
    return SalaryHistoryResponse.model_validate(entry)
