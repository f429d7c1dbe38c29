"""Profile API: the caller's own profile and password.

The principal id arrives as an explicit argument (get_principal_id); a
missing principal is answered with 401 before the service is used. Service
outcomes are mapped to status codes and envelopes here. Request bodies are
parsed after the principal check so unauthenticated calls always get 401.
"""

import logging
from typing import Annotated, Any, TypeVar, assert_never

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from profile_api.api.v1.dependencies import (
    get_principal_id,
    get_profile_service,
    get_profile_service_for_write,
)
from profile_api.application.dtos.profile import (
    EmailAlreadyInUse,
    InvalidCurrentPassword,
    OperationFailed,
    ProfileFound,
    ProfileNotFound,
    UserProfile,
    WeakPassword,
)
from profile_api.application.services.password_policy import password_strength_message
from profile_api.application.services.profile_service import ProfileService
from profile_api.core.config import get_settings
from profile_api.core.limiter import limit_password_change
from profile_api.schemas.envelope import ApiResponse, envelope_response
from profile_api.schemas.profile import (
    PasswordChangeRequest,
    ProfileResponse,
    ProfileUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MSG_UNAUTHORIZED = "Unauthorized - user not authenticated"
MSG_PROFILE_NOT_FOUND = "User profile not found"
MSG_USER_NOT_FOUND = "User not found"
MSG_RETRIEVE_FAILED = "Failed to retrieve user profile"
MSG_RETRIEVED = "Profile retrieved successfully"
MSG_UPDATE_INVALID_BODY = (
    "Invalid request body - please check first_name, last_name, and email fields"
)
MSG_EMAIL_IN_USE = "Email address already in use by another account"
MSG_UPDATE_FAILED = "Failed to update profile"
MSG_UPDATED = "Profile updated successfully"
MSG_PASSWORD_INVALID_BODY = (
    "Invalid request body - current_password and new_password are required (min 8 chars)"
)
MSG_WRONG_PASSWORD = "Current password is incorrect"
MSG_PASSWORD_FAILED = "Failed to update password"
MSG_PASSWORD_CHANGED = "Password changed successfully"

OPAQUE_ERROR_CODE = "INTERNAL_ERROR"

_ENVELOPE_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ApiResponse[Any], "description": MSG_UNAUTHORIZED},
    404: {"model": ApiResponse[Any], "description": MSG_PROFILE_NOT_FOUND},
    500: {"model": ApiResponse[Any], "description": "Query or connection failure"},
}


def _request_body(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI requestBody for a manually parsed JSON body."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


def _diagnostic(detail: str) -> str:
    """Client-facing error detail for a 500: raw text only when allowed by settings."""
    if get_settings().show_error_details and detail:
        return detail
    return OPAQUE_ERROR_CODE


def _profile_payload(profile: UserProfile) -> ProfileResponse:
    return ProfileResponse.model_validate(profile)


def _unauthorized() -> JSONResponse:
    return envelope_response(401, ApiResponse.fail(MSG_UNAUTHORIZED))


BodyT = TypeVar("BodyT", bound=BaseModel)


async def _parse_body(
    request: Request, model: type[BodyT]
) -> tuple[BodyT | None, str | None]:
    """Validate the JSON body against model; return (body, None) or (None, error text)."""
    raw = await request.body()
    try:
        return model.model_validate_json(raw or b"{}"), None
    except ValidationError as e:
        return None, "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )


@router.get(
    "",
    response_model=ApiResponse[ProfileResponse],
    responses=_ENVELOPE_RESPONSES,
)
async def get_profile(
    principal_id: Annotated[str | None, Depends(get_principal_id)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> JSONResponse:
    """Return the authenticated caller's profile."""
    if principal_id is None:
        return _unauthorized()
    outcome = await profile_service.get_profile(principal_id)
    if isinstance(outcome, ProfileFound):
        return envelope_response(
            200, ApiResponse.ok(MSG_RETRIEVED, _profile_payload(outcome.profile))
        )
    if isinstance(outcome, ProfileNotFound):
        return envelope_response(404, ApiResponse.fail(MSG_PROFILE_NOT_FOUND))
    if isinstance(outcome, OperationFailed):
        return envelope_response(
            500, ApiResponse.fail(MSG_RETRIEVE_FAILED, _diagnostic(outcome.detail))
        )
    assert_never(outcome)


@router.put(
    "",
    response_model=ApiResponse[ProfileResponse],
    responses={
        **_ENVELOPE_RESPONSES,
        400: {"model": ApiResponse[Any], "description": MSG_UPDATE_INVALID_BODY},
        409: {"model": ApiResponse[Any], "description": MSG_EMAIL_IN_USE},
    },
    openapi_extra=_request_body(ProfileUpdateRequest),
)
async def update_profile(
    request: Request,
    principal_id: Annotated[str | None, Depends(get_principal_id)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service_for_write)],
) -> JSONResponse:
    """Update the caller's first name, last name and email."""
    if principal_id is None:
        return _unauthorized()
    body, invalid = await _parse_body(request, ProfileUpdateRequest)
    if body is None:
        return envelope_response(400, ApiResponse.fail(MSG_UPDATE_INVALID_BODY, invalid))
    outcome = await profile_service.update_profile(
        principal_id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=str(body.email),
    )
    if isinstance(outcome, ProfileFound):
        return envelope_response(
            200, ApiResponse.ok(MSG_UPDATED, _profile_payload(outcome.profile))
        )
    if isinstance(outcome, ProfileNotFound):
        return envelope_response(404, ApiResponse.fail(MSG_PROFILE_NOT_FOUND))
    if isinstance(outcome, EmailAlreadyInUse):
        return envelope_response(409, ApiResponse.fail(MSG_EMAIL_IN_USE))
    if isinstance(outcome, OperationFailed):
        return envelope_response(
            500, ApiResponse.fail(MSG_UPDATE_FAILED, _diagnostic(outcome.detail))
        )
    assert_never(outcome)


@router.put(
    "/password",
    response_model=ApiResponse[ProfileResponse],
    responses={
        **_ENVELOPE_RESPONSES,
        400: {"model": ApiResponse[Any], "description": "Invalid body or weak password"},
        429: {"description": "Too many password change attempts"},
    },
    openapi_extra=_request_body(PasswordChangeRequest),
)
@limit_password_change
async def change_password(
    request: Request,
    principal_id: Annotated[str | None, Depends(get_principal_id)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service_for_write)],
) -> JSONResponse:
    """Change the caller's password after verifying the current one."""
    if principal_id is None:
        return _unauthorized()
    body, invalid = await _parse_body(request, PasswordChangeRequest)
    if body is None:
        return envelope_response(400, ApiResponse.fail(MSG_PASSWORD_INVALID_BODY, invalid))
    outcome = await profile_service.change_password(
        principal_id,
        current_password=body.current_password,
        new_password=body.new_password,
    )
    if isinstance(outcome, ProfileFound):
        return envelope_response(
            200, ApiResponse.ok(MSG_PASSWORD_CHANGED, _profile_payload(outcome.profile))
        )
    if isinstance(outcome, WeakPassword):
        return envelope_response(
            400,
            ApiResponse.fail(
                password_strength_message(outcome.missing, outcome.too_long),
                "WEAK_PASSWORD",
            ),
        )
    if isinstance(outcome, ProfileNotFound):
        return envelope_response(404, ApiResponse.fail(MSG_USER_NOT_FOUND))
    if isinstance(outcome, InvalidCurrentPassword):
        return envelope_response(401, ApiResponse.fail(MSG_WRONG_PASSWORD))
    if isinstance(outcome, OperationFailed):
        return envelope_response(
            500, ApiResponse.fail(MSG_PASSWORD_FAILED, _diagnostic(outcome.detail))
        )
    assert_never(outcome)
