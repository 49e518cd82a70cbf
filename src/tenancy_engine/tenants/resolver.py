"""Tenant resolution from request signals.

Priority: tenant header, then a ``/t/<slug>`` or ``/tenant/<slug>`` path
prefix, then the first label of the host name. The first signal that yields a
candidate wins; an unknown candidate is an error, not a fallthrough.
"""

import ipaddress
import logging
import re
from typing import Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from tenancy_engine.common.config import TenancySettings
from tenancy_engine.common.context import RequestContext
from tenancy_engine.common.exceptions import TenantNotFoundError
from tenancy_engine.tenants.service import TenantService, normalize_slug

logger = logging.getLogger(__name__)

SOURCE_HEADER = "header"
SOURCE_PATH = "path"
SOURCE_HOST = "host"

PATH_PREFIX_RE = re.compile(r"^/(?:t|tenant)/([a-z0-9-]+)(?=/|$)", re.IGNORECASE)

LOOPBACK_HOSTS = {"localhost"}


def slug_from_path(path: str) -> Optional[str]:
    match = PATH_PREFIX_RE.match(path or "")
    return match.group(1) if match else None


def strip_tenant_prefix(path: str) -> str:
    """``/t/acme/api/resources`` -> ``/api/resources``."""
    stripped = PATH_PREFIX_RE.sub("", path or "", count=1)
    return stripped or "/"


def _hostname(host: str) -> str:
    host = host.strip().lower()
    if host.startswith("["):
        # [::1]:8000
        return host[1:].split("]", 1)[0]
    if host.count(":") == 1:
        host = host.split(":", 1)[0]
    return host


def _is_ip(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


def slug_from_host(host: Optional[str]) -> Optional[str]:
    """First host label, ignoring loopback names and bare IP addresses."""
    if not host:
        return None
    hostname = _hostname(host)
    if not hostname or hostname in LOOPBACK_HOSTS or _is_ip(hostname):
        return None
    return hostname.split(".", 1)[0] or None


def extract_slug(
    headers: Mapping[str, str],
    path: str,
    host: Optional[str],
    header_name: str = "X-Tenant-ID",
) -> tuple[Optional[str], Optional[str]]:
    """Return ``(normalized_slug, source)`` or ``(None, None)``."""
    header_value = headers.get(header_name)
    if header_value and header_value.strip():
        return normalize_slug(header_value), SOURCE_HEADER

    path_slug = slug_from_path(path)
    if path_slug:
        return normalize_slug(path_slug), SOURCE_PATH

    host_slug = slug_from_host(host)
    if host_slug:
        return normalize_slug(host_slug), SOURCE_HOST

    return None, None


class TenantResolver:
    """Turns request signals into a tenant-bearing ``RequestContext``."""

    def __init__(self, settings: TenancySettings, tenant_service: TenantService):
        self.settings = settings
        self.tenant_service = tenant_service

    async def resolve(
        self,
        session: AsyncSession,
        headers: Mapping[str, str],
        path: str,
        host: Optional[str],
    ) -> RequestContext:
        slug, source = extract_slug(
            headers, path, host, header_name=self.settings.tenant_header
        )
        if slug is None:
            return RequestContext()

        tenant = await self.tenant_service.get_by_slug(session, slug)
        if tenant is None:
            logger.warning(
                "Tenant not found: %s (source: %s, path: %s)",
                slug, source, path,
                extra={"tenant_slug": slug, "tenant_source": source},
            )
            raise TenantNotFoundError(slug)

        return RequestContext(tenant=tenant, source=source)
