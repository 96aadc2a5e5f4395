"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from . import security


class _Credentials(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("password")
    @classmethod
    def _check_password_bytes(cls, value: str) -> str:
        # bcrypt only looks at the first 72 bytes.
        if len(value.encode("utf-8")) > security.MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {security.MAX_PASSWORD_BYTES} bytes in UTF-8")
        return value


class RegisterRequest(_Credentials):
    pass


class LoginRequest(_Credentials):
    pass


class UserResponse(BaseModel):
    id: int
    username: str


class TokenResponse(BaseModel):
    token: str


class LogoutResponse(BaseModel):
    ok: bool = True
