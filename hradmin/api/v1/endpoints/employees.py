"""Employee API: thin routes over the cached employee repository."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from hradmin.api.v1.dependencies import (
    CurrentAdmin,
    get_employee_repo,
    get_employment_repo,
)
from hradmin.core.limiter import limit_writes
from hradmin.domain.exceptions import ValidationException
from hradmin.infrastructure.firebase.repositories import (
    FirestoreEmployeeRepository,
    FirestoreEmploymentRepository,
)
from hradmin.schemas.employee import (
    EmployeeCreateRequest,
    EmployeeResponse,
    EmployeeUpdate,
)
from hradmin.schemas.employment import EmploymentResponse

router = APIRouter()

EmployeeRepo = Annotated[FirestoreEmployeeRepository, Depends(get_employee_repo)]


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(current_admin: CurrentAdmin, repo: EmployeeRepo):
    """List all employees (served from the read cache within its TTL)."""
    employees = await repo.list_all()
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.post("", response_model=EmployeeResponse, status_code=201)
@limit_writes
async def create_employee(
    request: Request,
    body: EmployeeCreateRequest,
    current_admin: CurrentAdmin,
    repo: EmployeeRepo,
):
    """Create an employee."""
    created = await repo.create(body.model_dump(exclude_none=True))
    return EmployeeResponse.model_validate(created)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: str, current_admin: CurrentAdmin, repo: EmployeeRepo):
    """Get an employee by id (404 if missing)."""
    return EmployeeResponse.model_validate(await repo.get(employee_id))


@router.put("/{employee_id}", response_model=EmployeeResponse)
@limit_writes
async def update_employee(
    request: Request,
    employee_id: str,
    body: EmployeeUpdate,
    current_admin: CurrentAdmin,
    repo: EmployeeRepo,
):
    """Update the given employee fields (partial)."""
    data = body.model_dump(exclude_unset=True)
    if not data:
        raise ValidationException("At least one field is required")
    return EmployeeResponse.model_validate(await repo.update(employee_id, data))


@router.delete("/{employee_id}", status_code=204)
@limit_writes
async def delete_employee(
    request: Request,
    employee_id: str,
    current_admin: CurrentAdmin,
    repo: EmployeeRepo,
) -> Response:
    """Delete an employee. Deleting a missing id is a no-op."""
    await repo.delete(employee_id)
    return Response(status_code=204)


@router.get("/{employee_id}/employments", response_model=list[EmploymentResponse])
async def list_employee_employments(
    employee_id: str,
    current_admin: CurrentAdmin,
    repo: EmployeeRepo,
    employment_repo: Annotated[FirestoreEmploymentRepository, Depends(get_employment_repo)],
):
    """List employments of one employee (404 if the employee is missing)."""
    await repo.get(employee_id)
    employments = await employment_repo.list_by_employee(employee_id)
    return [EmploymentResponse.model_validate(e) for e in employments]
