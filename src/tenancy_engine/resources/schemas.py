"""Pydantic schemas for resource endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ResourceCreate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None


class ResourceUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None


class ResourceResponse(BaseModel):
    id: str
    title: str
    content: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
