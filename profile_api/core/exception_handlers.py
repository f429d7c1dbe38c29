"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses, all rendered in the API envelope shape.

Profile routes turn domain outcomes into responses themselves (the principal
dependency absorbs AuthenticationException, the profile service absorbs
DuplicateEmailException). The ProfileApiException handler is the fallback
for a domain exception raised outside those paths, so it still gets its
mapped status instead of a 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from profile_api.core.config import get_settings
from profile_api.domain.exceptions import ProfileApiException
from profile_api.schemas.envelope import ApiResponse, envelope_response

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "AUTHENTICATION_ERROR": 401,
    "DUPLICATE_EMAIL": 409,
}


def _profile_api_exception_handler(
    request: Request, exc: ProfileApiException
) -> JSONResponse:
    """Fallback for domain exceptions not handled by a route: envelope with the
    exception message; error carries the machine-readable code (400 if unmapped).
    """
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return envelope_response(status, ApiResponse.fail(exc.message, exc.error_code))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with a summary of the validation errors."""
    summary = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return envelope_response(
        422, ApiResponse.fail("Request validation failed", summary or "VALIDATION_ERROR")
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Envelope for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ApiResponse.fail(str(exc.detail)).to_content(),
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when error details may be shown."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail = str(exc) if settings.show_error_details else "INTERNAL_ERROR"
    return envelope_response(500, ApiResponse.fail("Internal server error", detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: ProfileApiException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(ProfileApiException, _profile_api_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
