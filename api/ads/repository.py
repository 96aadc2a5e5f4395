"""
Ad persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime

from core.db import Database

AD_COLUMNS = "id, title, description, image_url, price, author_id, created_at"


async def create_ad(
    db: Database,
    *,
    title: str,
    description: str,
    image_url: str,
    price: float,
    author_id: int,
    created_at: datetime,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO ads (title, description, image_url, price, author_id, created_at)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING {AD_COLUMNS}
        """,
        title,
        description,
        image_url,
        price,
        author_id,
        created_at,
    )
    if row is None:
        raise RuntimeError("Failed to create ad.")
    return row


async def list_ads(db: Database, *, limit: int | None = None, offset: int = 0) -> list[dict]:
    # LIMIT NULL means no limit in PostgreSQL.
    return await db.fetch_all(
        f"""
        SELECT {AD_COLUMNS}
        FROM ads
        ORDER BY id ASC
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )
