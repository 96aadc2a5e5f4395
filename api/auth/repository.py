"""
Auth persistence helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone

from core.db import Database


async def create_user(db: Database, *, username: str, password_hash: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO users (username, password_hash)
        VALUES ($1, $2)
        RETURNING id, username
        """,
        username,
        password_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_username(db: Database, username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, password_hash
        FROM users
        WHERE username = $1
        """,
        username,
    )


async def get_user_by_id(db: Database, user_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def insert_token(db: Database, *, user_id: int, token_hash: str, expires_at: datetime) -> dict:
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)

    row = await db.fetch_one(
        """
        INSERT INTO tokens (value, user_id, expires_at)
        VALUES ($1, $2, $3)
        RETURNING value, user_id, created_at, expires_at, revoked_at
        """,
        token_hash,
        user_id,
        expires_at,
    )
    if row is None:
        raise RuntimeError("Failed to insert token.")
    return row


async def get_token_by_hash(db: Database, token_hash: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT value, user_id, created_at, expires_at, revoked_at
        FROM tokens
        WHERE value = $1
        """,
        token_hash,
    )


async def revoke_token_by_hash(db: Database, token_hash: str) -> bool:
    row = await db.fetch_one(
        """
        UPDATE tokens
        SET revoked_at = now()
        WHERE value = $1
          AND revoked_at IS NULL
        RETURNING value
        """,
        token_hash,
    )
    return row is not None


async def delete_expired_tokens(db: Database) -> int:
    status = await db.execute(
        """
        DELETE FROM tokens
        WHERE expires_at <= now()
        """
    )
    # asyncpg returns the command tag, e.g. "DELETE 3".
    try:
        return int(str(status).rsplit(" ", 1)[-1])
    except ValueError:
        return 0
