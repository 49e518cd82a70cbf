"""Typer CLI for Tenancy-Engine."""

import asyncio

import typer
from rich.console import Console

app = typer.Typer(name="tenancy", help="Tenancy-Engine: multi-tenant SaaS API")
console = Console()


@app.command()
def serve(
    host: str = typer.Option(None, help="Bind host (defaults to TENANCY_HOST)"),
    port: int = typer.Option(None, help="Bind port (defaults to TENANCY_PORT)"),
):
    """Start the Tenancy-Engine API server."""
    import uvicorn
    from tenancy_engine.app import create_app
    from tenancy_engine.common.config import get_settings
    from tenancy_engine.common.logging import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level)
    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting Tenancy-Engine on {host}:{port}[/bold green]")
    uvicorn.run(create_app(), host=host, port=port)


async def _with_db(work):
    from tenancy_engine.common.config import get_settings
    from tenancy_engine.common.database import DatabaseManager

    settings = get_settings()
    db = DatabaseManager(settings)
    await db.init()
    try:
        await db.create_all()
        return await work(db, settings)
    finally:
        await db.close()


@app.command()
def seed():
    """Create the Acme and Globex demo tenants."""
    from tenancy_engine.seed import DEMO_PASSWORD, seed_demo

    report = asyncio.run(_with_db(seed_demo))
    for slug in report.created:
        console.print(f"  [green]created[/green] {slug}")
    for slug in report.skipped:
        console.print(f"  [yellow]skip[/yellow] {slug} already exists")
    if report.created:
        console.print(f"\nDemo users log in with password [bold]{DEMO_PASSWORD}[/bold]")


@app.command("create-tenant")
def create_tenant(
    slug: str = typer.Argument(..., help="URL-safe tenant slug"),
    name: str = typer.Option(..., help="Display name"),
    primary: str = typer.Option(None, help="Theme primary color"),
    background: str = typer.Option(None, help="Theme background color"),
    text: str = typer.Option(None, help="Theme text color"),
):
    """Create a tenant directly in the database."""
    from tenancy_engine.common.exceptions import TenancyError
    from tenancy_engine.tenants.service import TenantService

    theme = {"primary": primary, "background": background, "text": text}

    async def work(db, settings):
        async with db.get_session() as session:
            tenant = await TenantService().create_tenant(
                session, name=name, slug=slug,
                theme={k: v for k, v in theme.items() if v},
            )
            return tenant.slug, tenant.id

    try:
        created_slug, tenant_id = asyncio.run(_with_db(work))
    except TenancyError as e:
        console.print(f"[bold red]{e.code}[/bold red]: {e.message}")
        raise typer.Exit(1)
    console.print(f"[bold green]Created[/bold green] {created_slug} ({tenant_id})")


@app.command()
def health(
    url: str = typer.Option("http://localhost:4000", help="Server URL"),
):
    """Check Tenancy-Engine server health."""
    import httpx

    try:
        resp = httpx.get(f"{url}/api/health", timeout=5)
        data = resp.json()
        console.print(f"[bold green]{data['status']}[/bold green] v{data['version']}")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
