"""Tenant theme resolution and CSS rendering."""

from dataclasses import dataclass
from typing import Optional

from tenancy_engine.common.config import TenancySettings
from tenancy_engine.tenants.models import TenantModel


@dataclass(frozen=True)
class Theme:
    primary: str
    background: str
    text: str


def default_theme(settings: TenancySettings) -> Theme:
    return Theme(
        primary=settings.default_theme_primary,
        background=settings.default_theme_background,
        text=settings.default_theme_text,
    )


def effective_theme(tenant: Optional[TenantModel], settings: TenancySettings) -> Theme:
    """The tenant's colors, with unset ones taken from the default theme."""
    base = default_theme(settings)
    if tenant is None:
        return base
    return Theme(
        primary=tenant.theme_primary or base.primary,
        background=tenant.theme_background or base.background,
        text=tenant.theme_text or base.text,
    )


def render_css(theme: Theme) -> str:
    return (
        f":root{{--color-primary:{theme.primary};"
        f"--color-bg:{theme.background};"
        f"--color-text:{theme.text};}}"
    )
