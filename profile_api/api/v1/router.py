"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes use
dependencies from profile_api.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from profile_api.api.v1.endpoints import profile

api_router = APIRouter()

api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
