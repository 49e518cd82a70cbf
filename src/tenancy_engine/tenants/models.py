"""SQLAlchemy model for tenants."""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tenancy_engine.common.models import Base, TimestampMixin, generate_uuid


class TenantModel(Base, TimestampMixin):
    __tablename__ = "tenants"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)

    # Brand is opaque to the core; only rendered back to clients.
    logo_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tagline: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Unset colors fall back to the configured default theme.
    theme_primary: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    theme_background: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    theme_text: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
