"""
Ad business logic.
"""

from __future__ import annotations

import logging

from auth import security
from auth.service import require_user_id
from core.db import Database

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_ad_response(row: dict) -> schemas.AdResponse:
    return schemas.AdResponse(
        id=int(row["id"]),
        title=str(row["title"]),
        description=str(row["description"] or ""),
        image_url=str(row["image_url"] or ""),
        price=float(row["price"]),
        author_id=int(row["author_id"]),
        created_at=row["created_at"],
    )


async def create_ad(
    db: Database,
    payload: schemas.AdCreateRequest,
    *,
    current_user: dict,
) -> schemas.AdResponse:
    author_id = require_user_id(current_user)
    row = await repository.create_ad(
        db,
        title=payload.title,
        description=payload.description,
        image_url=payload.image_url,
        price=payload.price,
        author_id=author_id,
        created_at=security.utc_now(),
    )
    logger.info("User id=%s created ad id=%s", author_id, row["id"])
    return _to_ad_response(row)


async def list_ads(
    db: Database,
    *,
    limit: int | None = None,
    offset: int = 0,
) -> list[schemas.AdResponse]:
    rows = await repository.list_ads(db, limit=limit, offset=max(0, offset))
    return [_to_ad_response(row) for row in rows]
