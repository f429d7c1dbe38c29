"""API response envelope shared by every endpoint.

Body shape: {"success", "message", "payload"?, "error"?}. payload is present
only on success, error only on failure; absent fields are omitted from the
JSON rather than rendered as null.
"""

from typing import Any, Generic, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, model_validator

PayloadT = TypeVar("PayloadT")


class ApiResponse(BaseModel, Generic[PayloadT]):
    """Tagged result: success flag, message, and payload (success) or error (failure)."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable outcome")
    payload: PayloadT | None = Field(default=None, description="Result value (success only)")
    error: str | None = Field(
        default=None, description="Diagnostic detail (failure only; may be an opaque code)"
    )

    @model_validator(mode="after")
    def check_payload_or_error(self) -> "ApiResponse[PayloadT]":
        """success=True requires payload and forbids error; success=False forbids payload."""
        if self.success:
            if self.payload is None:
                raise ValueError("successful response requires a payload")
            if self.error is not None:
                raise ValueError("successful response must not carry an error")
        elif self.payload is not None:
            raise ValueError("failed response must not carry a payload")
        return self

    @classmethod
    def ok(cls, message: str, payload: Any) -> "ApiResponse[Any]":
        return cls(success=True, message=message, payload=payload)

    @classmethod
    def fail(cls, message: str, error: str | None = None) -> "ApiResponse[Any]":
        return cls(success=False, message=message, error=error or None)

    def to_content(self) -> dict[str, Any]:
        """JSON-ready dict; drops payload/error when absent (nested nulls are kept)."""
        content: dict[str, Any] = {"success": self.success, "message": self.message}
        dumped = self.model_dump(mode="json", include={"payload", "error"})
        if self.payload is not None:
            content["payload"] = dumped["payload"]
        if self.error is not None:
            content["error"] = dumped["error"]
        return content


def envelope_response(status_code: int, envelope: ApiResponse[Any]) -> JSONResponse:
    """Render an envelope as a JSONResponse with the given status."""
    return JSONResponse(status_code=status_code, content=envelope.to_content())
