"""Tenancy-Engine: tenant-isolated multi-tenant SaaS API."""

from tenancy_engine.common.context import RequestContext
from tenancy_engine.tenants.resolver import extract_slug

__all__ = [
    "RequestContext",
    "extract_slug",
]
__version__ = "0.1.0"
