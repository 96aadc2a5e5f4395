"""
Pydantic schemas for ad endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AdCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(default="", max_length=10_000)
    image_url: str = Field(default="", max_length=2048)
    price: float = Field(..., ge=0, allow_inf_nan=False)


class AdResponse(BaseModel):
    id: int
    title: str
    description: str
    image_url: str
    price: float
    author_id: int
    created_at: datetime
