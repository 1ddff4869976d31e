"""Auth API: login, logout, and current admin."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from hradmin.api.v1.dependencies import CurrentAdmin, get_session_service
from hradmin.application.services.session_service import SessionService
from hradmin.core.limiter import check_login_rate_per_mobile, limit_auth
from hradmin.schemas.auth import AdminResponse, LoginRequest, TokenResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(
    request: Request,
    body: LoginRequest,
    session: Annotated[SessionService, Depends(get_session_service)],
):
    """Authenticate with mobile and password; return JWT.

    Activates the admin's read cache scope; cached data of any other admin
    is dropped.
    """
    check_login_rate_per_mobile(body.mobile)
    result = await session.login(body.mobile, body.password)
    return TokenResponse(access_token=result.access_token)


@router.post("/logout", status_code=204)
async def logout(
    current_admin: CurrentAdmin,
    session: Annotated[SessionService, Depends(get_session_service)],
) -> Response:
    """Clear all cached reads and the cache scope. The client discards its token."""
    session.logout()
    return Response(status_code=204)


@router.get("/me", response_model=AdminResponse)
async def get_me(current_admin: CurrentAdmin):
    """Return the currently authenticated admin from JWT."""
    return AdminResponse.model_validate(current_admin)
