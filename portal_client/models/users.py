"""Pydantic models for the user-management endpoints.

Field names are snake_case in Python and camelCase on the wire. Unknown
fields returned by the server are kept on the model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class UserProfile(_CamelModel):
    """Profile of the signed-in user as returned by ``GET /users/me``."""

    id: int | str
    email: str | None = None
    full_name: str | None = Field(default=None, alias="fullName")
    phone: str | None = None
    phone_verified: bool = Field(default=False, alias="phoneVerified")
    role: str | None = None

    @property
    def email_verified(self) -> bool:
        # Only the explicit boolean flag counts as verified.
        return (self.model_extra or {}).get("emailVerified") is True

    @property
    def initials(self) -> str:
        name = (self.full_name or "A").strip()
        parts = [p for p in name.split() if p]
        if not parts:
            return "A"
        return "".join(p[0] for p in parts[:2]).upper()


class UpdateProfileRequest(_CamelModel):
    """Body of ``PUT /users/me``."""

    full_name: str | None = Field(default=None, alias="fullName")
    phone: str | None = None

    @field_validator("phone", mode="before")
    @classmethod
    def _blank_phone_is_null(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ChangePasswordRequest(_CamelModel):
    """Body of ``PUT /users/me/password``."""

    current_password: str = Field(..., min_length=1, alias="currentPassword")
    new_password: str = Field(..., min_length=1, alias="newPassword")
