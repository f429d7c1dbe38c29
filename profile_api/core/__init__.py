"""Core: config, logging, exception handlers, lifespan, rate limiting."""

from profile_api.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
