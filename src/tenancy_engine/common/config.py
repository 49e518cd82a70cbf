"""Tenancy-Engine configuration via pydantic-settings."""

import warnings
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_DEFAULTS = {
    "secret_key": "insecure-dev-key-change-me",
    "admin_api_key": "insecure-admin-key-change-me",
}


class TenancySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TENANCY_", frozen=True)

    environment: str = "development"

    # Signs session tokens. One secret for the whole process.
    secret_key: str = "insecure-dev-key-change-me"
    admin_api_key: str = "insecure-admin-key-change-me"

    # Database
    db_url: str = "sqlite+aiosqlite:///./data/tenancy.db"

    # API
    api_title: str = "Tenancy-Engine"
    api_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 4000
    api_prefix: str = ""
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    log_level: str = "INFO"

    # Tenant resolution
    tenant_header: str = "X-Tenant-ID"

    # Sessions
    token_ttl_days: int = 7
    cookie_name: str = "token"
    cookie_secure: bool = False
    password_iterations: int = 260_000

    # Theme applied when a tenant leaves a color unset
    default_theme_primary: str = "#2d6cdf"
    default_theme_background: str = "#ffffff"
    default_theme_text: str = "#111111"

    # When true, resource endpoints demand a session token
    resources_require_auth: bool = False

    @property
    def token_max_age(self) -> int:
        """Token lifetime in seconds."""
        return self.token_ttl_days * 24 * 3600

    def validate_for_production(self) -> None:
        """Raise if insecure defaults are used in non-development environments."""
        insecure_fields = [
            field
            for field, default in _INSECURE_DEFAULTS.items()
            if getattr(self, field) == default
        ]

        if self.environment != "development" and insecure_fields:
            env_vars = ", ".join(f"TENANCY_{f.upper()}" for f in insecure_fields)
            raise RuntimeError(
                f"Insecure default values detected in '{self.environment}' environment. "
                f"Set these environment variables to secure values: {env_vars}. "
                "Generate secrets with: python -c \"import secrets; print(secrets.token_urlsafe(48))\""
            )

        if insecure_fields:
            warnings.warn(
                "Using insecure default keys; set TENANCY_SECRET_KEY and "
                "TENANCY_ADMIN_API_KEY for production",
                UserWarning,
                stacklevel=2,
            )


@lru_cache
def get_settings() -> TenancySettings:
    settings = TenancySettings()
    settings.validate_for_production()
    return settings
