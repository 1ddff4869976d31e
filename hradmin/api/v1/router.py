"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from hradmin.api.v1.dependencies.
"""

from fastapi import APIRouter

from hradmin.api.v1.endpoints import (
    auth,
    documents,
    employees,
    employments,
    health,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(employments.router, prefix="/employments", tags=["employments"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
