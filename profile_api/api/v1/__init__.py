"""API version 1."""

from profile_api.api.v1.router import api_router

__all__ = ["api_router"]
