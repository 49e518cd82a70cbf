"""Demo data: the Acme and Globex tenants with an admin and a few resources."""

from dataclasses import dataclass, field

from tenancy_engine.auth.service import IdentityProvider
from tenancy_engine.common.config import TenancySettings
from tenancy_engine.common.database import DatabaseManager
from tenancy_engine.resources.service import ResourceStore
from tenancy_engine.tenants.service import TenantService
from tenancy_engine.users.models import ROLE_ADMIN, ROLE_MEMBER
from tenancy_engine.users.service import UserStore

DEMO_PASSWORD = "password123"

DEMO_TENANTS = [
    {
        "name": "Acme Corp",
        "slug": "acme",
        "tagline": "Roadrunner Ready",
        "theme": {"primary": "#e11d48", "background": "#fff7ed", "text": "#111827"},
        "users": [
            ("alice@acme.com", "Alice", ROLE_ADMIN),
            ("bob@acme.com", "Bob", ROLE_MEMBER),
        ],
        "resources": [
            ("Acme Guide", "Welcome Acme users"),
            ("Acme Roadmap", "Q4 plans"),
        ],
    },
    {
        "name": "Globex",
        "slug": "globex",
        "tagline": "Future Proof",
        "theme": {"primary": "#0ea5e9", "background": "#0b1220", "text": "#e2e8f0"},
        "users": [
            ("gary@globex.com", "Gary", ROLE_ADMIN),
        ],
        "resources": [
            ("Globex Handbook", "Welcome Globex users"),
        ],
    },
]


@dataclass
class SeedReport:
    created: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


async def seed_demo(db: DatabaseManager, settings: TenancySettings) -> SeedReport:
    """Create the demo tenants; tenants that already exist are left untouched."""
    tenants = TenantService()
    users = UserStore()
    identity = IdentityProvider(settings, users)
    resources = ResourceStore()
    report = SeedReport()

    async with db.get_session() as session:
        for seed in DEMO_TENANTS:
            if await tenants.get_by_slug(session, seed["slug"]) is not None:
                report.skipped.append(seed["slug"])
                continue

            tenant = await tenants.create_tenant(
                session,
                name=seed["name"],
                slug=seed["slug"],
                tagline=seed["tagline"],
                theme=seed["theme"],
            )
            for email, name, role in seed["users"]:
                await identity.register(
                    session, tenant, email, DEMO_PASSWORD, name, role=role
                )
            for title, content in seed["resources"]:
                await resources.create(session, tenant.id, title=title, content=content)
            report.created.append(tenant.slug)

    return report
