"""Pydantic schemas for tenant endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from tenancy_engine.tenants.service import COLOR_PATTERN


class BrandSchema(BaseModel):
    logo_url: Optional[str] = None
    tagline: Optional[str] = None


class ThemeSchema(BaseModel):
    primary: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    background: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    text: Optional[str] = Field(None, pattern=COLOR_PATTERN)


class TenantCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=100)
    brand: BrandSchema = BrandSchema()
    theme: ThemeSchema = ThemeSchema()


class TenantProfile(BaseModel):
    """Public tenant profile with the effective theme."""
    name: str
    slug: str
    brand: BrandSchema
    theme: ThemeSchema


class TenantResponse(BaseModel):
    id: str
    name: str
    slug: str
    brand: BrandSchema
    created_at: datetime
