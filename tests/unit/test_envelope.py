"""Unit tests for the ApiResponse envelope invariants and rendering."""

import pytest
from pydantic import ValidationError

from profile_api.schemas.envelope import ApiResponse, envelope_response
from profile_api.schemas.profile import ProfileResponse
from tests.fakes import make_profile


def test_ok_renders_payload_without_error() -> None:
    payload = ProfileResponse.model_validate(make_profile("42", "alice"))
    content = ApiResponse.ok("done", payload).to_content()
    assert content["success"] is True
    assert content["message"] == "done"
    assert content["payload"]["username"] == "alice"
    assert content["payload"]["created_at"] == "2025-01-02T03:04:05Z"
    assert "error" not in content


def test_fail_omits_payload_and_empty_error() -> None:
    assert ApiResponse.fail("nope").to_content() == {"success": False, "message": "nope"}
    assert ApiResponse.fail("nope", "").to_content() == {"success": False, "message": "nope"}


def test_fail_keeps_error_detail() -> None:
    content = ApiResponse.fail("broken", "INTERNAL_ERROR").to_content()
    assert content == {"success": False, "message": "broken", "error": "INTERNAL_ERROR"}


def test_nested_nulls_in_payload_are_kept() -> None:
    content = ApiResponse.ok("ok", {"middle_name": None}).to_content()
    assert content["payload"] == {"middle_name": None}


def test_success_requires_payload() -> None:
    with pytest.raises(ValidationError):
        ApiResponse(success=True, message="ok")


def test_success_forbids_error() -> None:
    with pytest.raises(ValidationError):
        ApiResponse(success=True, message="ok", payload={"a": 1}, error="x")


def test_failure_forbids_payload() -> None:
    with pytest.raises(ValidationError):
        ApiResponse(success=False, message="bad", payload={"a": 1})


def test_envelope_response_sets_status_and_body() -> None:
    response = envelope_response(404, ApiResponse.fail("User profile not found"))
    assert response.status_code == 404
    assert response.body == b'{"success":false,"message":"User profile not found"}'
