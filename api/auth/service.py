"""
Auth business logic.
"""

from __future__ import annotations

import logging

from core.db import Database
from core.errors import unauthorized

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        username=str(user_row["username"]),
    )


async def register(db: Database, payload: schemas.RegisterRequest) -> schemas.UserResponse:
    # Duplicate usernames are rejected by the users.username unique constraint.
    password_hash = security.hash_password(payload.password)
    user_row = await repository.create_user(db, username=payload.username, password_hash=password_hash)
    logger.info("Registered user id=%s username=%s", user_row["id"], user_row["username"])
    return _to_user_response(user_row)


async def login(
    db: Database,
    payload: schemas.LoginRequest,
    *,
    token_ttl_minutes: int,
) -> schemas.TokenResponse:
    user_row = await repository.get_user_by_username(db, payload.username)
    if user_row is None:
        security.burn_password_check(payload.password)
        is_valid = False
    else:
        is_valid = security.verify_password(payload.password, str(user_row.get("password_hash") or ""))
    if not is_valid:
        logger.info("Rejected login for username=%s", payload.username)
        raise unauthorized("Invalid username or password")

    purged = await repository.delete_expired_tokens(db)
    if purged:
        logger.debug("Purged %d expired tokens", purged)

    raw_token = security.build_access_token()
    await repository.insert_token(
        db,
        user_id=int(user_row["id"]),
        token_hash=security.hash_access_token(raw_token),
        expires_at=security.token_expires_at(token_ttl_minutes),
    )
    logger.info("Issued token for user id=%s", user_row["id"])
    return schemas.TokenResponse(token=raw_token)


async def logout(db: Database, access_token: str) -> schemas.LogoutResponse:
    token_hash = security.hash_access_token(access_token)
    revoked = await repository.revoke_token_by_hash(db, token_hash)
    if not revoked:
        raise unauthorized()
    logger.info("Revoked token")
    return schemas.LogoutResponse(ok=True)


async def get_user_from_access_token(db: Database, access_token: str) -> dict:
    try:
        token_hash = security.hash_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise unauthorized() from exc

    token_row = await repository.get_token_by_hash(db, token_hash)
    if token_row is None or not security.is_token_usable(token_row):
        logger.info("Rejected unknown, expired or revoked token")
        raise unauthorized()

    user_row = await repository.get_user_by_id(db, int(token_row["user_id"]))
    if user_row is None:
        logger.warning("Token references missing user id=%s", token_row["user_id"])
        raise unauthorized()
    return user_row


def require_user_id(current_user: dict | None) -> int:
    if not current_user or current_user.get("id") is None:
        raise unauthorized("User not found")
    return int(current_user["id"])
