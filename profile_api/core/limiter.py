"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from profile_api.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _password_change_limit() -> str:
    # Resolved per request so settings are not loaded at import time.
    return get_settings().password_change_limit


limit_password_change = limiter.limit(_password_change_limit)
