"""Dependency injection singletons for Tenancy-Engine."""

from tenancy_engine.access.guard import AccessGuard
from tenancy_engine.auth.service import IdentityProvider
from tenancy_engine.common.config import get_settings
from tenancy_engine.common.database import DatabaseManager
from tenancy_engine.resources.service import ResourceStore
from tenancy_engine.tenants.resolver import TenantResolver
from tenancy_engine.tenants.service import TenantService
from tenancy_engine.users.service import UserStore

_db: DatabaseManager | None = None
_tenants: TenantService | None = None
_resolver: TenantResolver | None = None
_users: UserStore | None = None
_resources: ResourceStore | None = None
_identity: IdentityProvider | None = None
_guard: AccessGuard | None = None


def get_db() -> DatabaseManager:
    global _db
    if _db is None:
        _db = DatabaseManager(get_settings())
    return _db


def get_tenant_service() -> TenantService:
    global _tenants
    if _tenants is None:
        _tenants = TenantService()
    return _tenants


def get_tenant_resolver() -> TenantResolver:
    global _resolver
    if _resolver is None:
        _resolver = TenantResolver(get_settings(), get_tenant_service())
    return _resolver


def get_user_store() -> UserStore:
    global _users
    if _users is None:
        _users = UserStore()
    return _users


def get_resource_store() -> ResourceStore:
    global _resources
    if _resources is None:
        _resources = ResourceStore()
    return _resources


def get_identity_provider() -> IdentityProvider:
    global _identity
    if _identity is None:
        _identity = IdentityProvider(get_settings(), get_user_store())
    return _identity


def get_access_guard() -> AccessGuard:
    global _guard
    if _guard is None:
        _guard = AccessGuard()
    return _guard


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    global _db, _tenants, _resolver, _users, _resources, _identity, _guard
    _db = None
    _tenants = None
    _resolver = None
    _users = None
    _resources = None
    _identity = None
    _guard = None
