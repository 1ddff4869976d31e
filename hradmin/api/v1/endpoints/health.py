"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter, Request

from hradmin.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok status and whether Firestore is configured."""
    return HealthResponse(firestore=getattr(request.app.state, "firestore", None) is not None)
