"""
Auth security helpers.
"""

from __future__ import annotations

import hashlib
import secrets
from functools import lru_cache
from datetime import datetime, timedelta, timezone

import bcrypt

TOKEN_BYTES = 32
MAX_PASSWORD_BYTES = 72


class AuthSecurityError(RuntimeError):
    pass


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    if len(password) > MAX_PASSWORD_BYTES:
        raise AuthSecurityError("Password is longer than 72 bytes.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    if len(password) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    return bcrypt.hashpw(b"dummy-password-for-unknown-users", bcrypt.gensalt()).decode("utf-8")


def burn_password_check(plain_password: str) -> None:
    """
    Spend the same bcrypt work as a real check, for logins naming an unknown user.
    """
    verify_password(plain_password, _dummy_password_hash())


def build_access_token() -> str:
    # URL-safe random string for client storage/transmission.
    return secrets.token_urlsafe(TOKEN_BYTES)


def hash_access_token(raw_token: str) -> str:
    token = (raw_token or "").encode("utf-8")
    if not token:
        raise AuthSecurityError("Access token is empty.")
    return hashlib.sha256(token).hexdigest()


def token_expires_at(ttl_minutes: int, *, now: datetime | None = None) -> datetime:
    return (now or utc_now()) + timedelta(minutes=max(1, ttl_minutes))


def is_token_usable(token_row: dict, *, now: datetime | None = None) -> bool:
    if token_row.get("revoked_at") is not None:
        return False
    expires_at = token_row.get("expires_at")
    if not isinstance(expires_at, datetime):
        return False
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at > (now or utc_now())
