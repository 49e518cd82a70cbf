#!/usr/bin/env python3
"""Seed the database with the Acme and Globex demo tenants.

Usage:
    python scripts/seed_demo.py
    # or, once installed:
    tenancy seed
"""

import asyncio
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from tenancy_engine.common.config import get_settings
from tenancy_engine.common.database import DatabaseManager
from tenancy_engine.seed import DEMO_PASSWORD, seed_demo


async def main() -> None:
    settings = get_settings()
    db = DatabaseManager(settings)
    await db.init()
    await db.create_all()

    report = await seed_demo(db, settings)
    for slug in report.created:
        print(f"  [created] {slug}")
    for slug in report.skipped:
        print(f"  [skip] {slug} already exists")

    await db.close()
    print(f"\nDone. Demo users log in with password {DEMO_PASSWORD!r}.")


if __name__ == "__main__":
    asyncio.run(main())
