"""
Ad API endpoints. Mounted under the authenticated `/api` group.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies
from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.post("/ad", response_model=schemas.AdResponse)
async def create_ad(
    payload: schemas.AdCreateRequest,
    db: Database = Depends(get_db),
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> schemas.AdResponse:
    return await service.create_ad(db, payload, current_user=current_user)


@router.get("/ads", response_model=list[schemas.AdResponse])
async def list_ads(
    limit: int | None = Query(default=None, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    db: Database = Depends(get_db),
) -> list[schemas.AdResponse]:
    return await service.list_ads(db, limit=limit, offset=offset)
