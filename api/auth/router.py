"""
Auth API endpoints.

`router` carries the public routes; `protected_router` is mounted under the
authenticated `/api` group.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from core.db import Database, get_db

from . import dependencies, schemas, service

router = APIRouter()
protected_router = APIRouter()


@router.post("/register", response_model=schemas.UserResponse)
async def register(
    payload: schemas.RegisterRequest,
    db: Database = Depends(get_db),
) -> schemas.UserResponse:
    return await service.register(db, payload)


@router.post("/login", response_model=schemas.TokenResponse)
async def login(
    payload: schemas.LoginRequest,
    request: Request,
    db: Database = Depends(get_db),
) -> schemas.TokenResponse:
    return await service.login(
        db,
        payload,
        token_ttl_minutes=request.app.state.settings.token_ttl_minutes,
    )


@protected_router.post("/logout", response_model=schemas.LogoutResponse)
async def logout(
    access_token: str = Depends(dependencies.get_access_token),
    db: Database = Depends(get_db),
) -> schemas.LogoutResponse:
    return await service.logout(db, access_token)
