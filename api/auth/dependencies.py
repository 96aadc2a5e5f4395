"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Header

from core.db import Database, get_db
from core.errors import unauthorized

from . import service


def _extract_access_token(authorization: str | None) -> str:
    """
    Accept either `Bearer <token>` or the bare token value.
    """
    raw = (authorization or "").strip()
    if not raw:
        raise unauthorized()

    parts = raw.split(None, 1)
    if len(parts) == 1:
        return parts[0]

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise unauthorized()
    return token


async def get_access_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_access_token(authorization)


async def get_current_user(
    access_token: str = Depends(get_access_token),
    db: Database = Depends(get_db),
) -> dict:
    return await service.get_user_from_access_token(db, access_token)
