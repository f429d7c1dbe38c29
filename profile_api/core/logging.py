"""Logging configuration for the application.

Log records carry the current request ID (bound by RequestIDMiddleware);
outside a request it renders as "-".
"""

import logging
import sys
from contextvars import ContextVar, Token

from profile_api.core.config import get_settings

# Request ID for the current request (set by middleware, read by RequestIDFilter).
current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def bind_request_id(request_id: str) -> Token[str | None]:
    """Set the request ID for this context; return a token for reset_request_id."""
    return current_request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    current_request_id.reset(token)


class RequestIDFilter(logging.Filter):
    """Attach request_id to every record passing through the handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id.get() or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[handler],
    )
