"""Exception handlers render every error in the envelope shape."""

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient

from profile_api.core.exception_handlers import register_exception_handlers
from profile_api.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    ProfileApiException,
)
from profile_api.main import app as profile_app


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/auth")
    async def auth() -> None:
        raise AuthenticationException("Token expired")

    @app.get("/duplicate")
    async def duplicate() -> None:
        raise DuplicateEmailException("bob@example.com")

    @app.get("/domain")
    async def domain() -> None:
        raise ProfileApiException("Something domain-level went wrong")

    @app.get("/http")
    async def http() -> None:
        raise HTTPException(status_code=403, detail="Forbidden", headers={"X-Reason": "test"})

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("db password is hunter2")

    @app.get("/typed/{item_id}")
    async def typed(item_id: int) -> dict:
        return {"item_id": item_id}

    return app


@pytest.fixture
async def handler_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_authentication_exception_maps_to_401(handler_client: AsyncClient) -> None:
    response = await handler_client.get("/auth")
    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "message": "Token expired",
        "error": "AUTHENTICATION_ERROR",
    }


async def test_duplicate_email_maps_to_409(handler_client: AsyncClient) -> None:
    response = await handler_client.get("/duplicate")
    assert response.status_code == 409
    assert response.json()["message"] == "Email address already in use by another account"


async def test_http_exception_keeps_status_and_headers(handler_client: AsyncClient) -> None:
    response = await handler_client.get("/http")
    assert response.status_code == 403
    assert response.headers["x-reason"] == "test"
    assert response.json() == {"success": False, "message": "Forbidden"}


async def test_unknown_route_is_enveloped_404(handler_client: AsyncClient) -> None:
    response = await handler_client.get("/missing")
    assert response.status_code == 404
    assert response.json()["success"] is False


async def test_unhandled_exception_withholds_detail(handler_client: AsyncClient) -> None:
    response = await handler_client.get("/boom")
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "INTERNAL_ERROR"
    assert "hunter2" not in response.text


async def test_unhandled_exception_detail_when_enabled(
    handler_client: AsyncClient, show_error_details: None
) -> None:
    response = await handler_client.get("/boom")
    assert response.status_code == 500
    assert response.json()["error"] == "db password is hunter2"


async def test_validation_error_summarizes_location(handler_client: AsyncClient) -> None:
    response = await handler_client.get("/typed/abc")
    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "Request validation failed"
    assert body["error"].startswith("path.item_id:")


async def test_unmapped_domain_exception_falls_back_to_400(handler_client: AsyncClient) -> None:
    response = await handler_client.get("/domain")
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Something domain-level went wrong",
        "error": "ProfileApiException",
    }


def test_profile_app_registers_domain_exception_fallback() -> None:
    assert ProfileApiException in profile_app.exception_handlers
