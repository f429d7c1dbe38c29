"""Profile API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# Column widths of the users table.
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100


class ProfileResponse(BaseModel):
    """Caller's profile (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ProfileUpdateRequest(BaseModel):
    """Request body for PUT /profile."""

    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def email_fits_column(cls, v: object) -> object:
        if isinstance(v, str) and len(v.strip()) > EMAIL_MAX_LENGTH:
            raise ValueError(f"must be at most {EMAIL_MAX_LENGTH} characters")
        return v


class PasswordChangeRequest(BaseModel):
    """Request body for PUT /profile/password. Strength rules are checked by the service."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)
