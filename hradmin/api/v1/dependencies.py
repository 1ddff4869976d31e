"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the Firestore client, the admin-scoped read
cache, repositories and application services. Routes depend only on
these, not on infrastructure construction.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hradmin.application.dtos.admin import AdminResult
from hradmin.application.services.salary_service import SalaryService
from hradmin.application.services.session_service import SessionService
from hradmin.domain.exceptions import AuthenticationException
from hradmin.infrastructure.cache.scoped_read_cache import ScopedReadCache
from hradmin.infrastructure.firebase._rest_client import FirestoreRESTClient
from hradmin.infrastructure.firebase.repositories import (
    FirestoreAdminRepository,
    FirestoreEmployeeRepository,
    FirestoreEmploymentRepository,
    FirestoreSalaryHistoryRepository,
)
from hradmin.infrastructure.security.jwt import create_access_token, verify_token

_bearer = HTTPBearer(auto_error=False)


def get_firestore_client(request: Request) -> FirestoreRESTClient:
    """Firestore client created at startup; 503 when not configured."""
    client = getattr(request.app.state, "firestore", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Firestore is not configured")
    return client


def get_read_cache(request: Request) -> ScopedReadCache:
    """The process-wide admin-scoped read cache (created in create_app)."""
    return request.app.state.read_cache


FirestoreDep = Annotated[FirestoreRESTClient, Depends(get_firestore_client)]
ReadCacheDep = Annotated[ScopedReadCache, Depends(get_read_cache)]


def get_admin_repo(client: FirestoreDep) -> FirestoreAdminRepository:
    return FirestoreAdminRepository(client)


def get_employee_repo(
    client: FirestoreDep, cache: ReadCacheDep
) -> FirestoreEmployeeRepository:
    return FirestoreEmployeeRepository(client, cache)


def get_employment_repo(
    client: FirestoreDep, cache: ReadCacheDep
) -> FirestoreEmploymentRepository:
    return FirestoreEmploymentRepository(client, cache)


def get_salary_history_repo(client: FirestoreDep) -> FirestoreSalaryHistoryRepository:
    return FirestoreSalaryHistoryRepository(client)


def get_session_service(
    admin_repo: Annotated[FirestoreAdminRepository, Depends(get_admin_repo)],
    cache: ReadCacheDep,
) -> SessionService:
    """Session service bound to the shared read cache (composition root)."""
    return SessionService(admin_repo, cache, create_access_token)


def get_salary_service(
    employment_repo: Annotated[FirestoreEmploymentRepository, Depends(get_employment_repo)],
    salary_history_repo: Annotated[
        FirestoreSalaryHistoryRepository, Depends(get_salary_history_repo)
    ],
) -> SalaryService:
    return SalaryService(employment_repo, salary_history_repo)


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
    admin_repo: Annotated[FirestoreAdminRepository, Depends(get_admin_repo)],
    session: Annotated[SessionService, Depends(get_session_service)],
) -> AdminResult:
    """Resolve the admin from the Bearer token and activate their cache scope.

    A token for a different admin than the current scope clears the read
    cache before any cached read in this request.
    """
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        raise AuthenticationException("Invalid or expired token") from None
    admin = await admin_repo.get_by_id(payload["sub"])
    if admin is None:
        raise AuthenticationException("Admin no longer exists")
    session.activate(admin.id)
    return admin


CurrentAdmin = Annotated[AdminResult, Depends(get_current_admin)]
