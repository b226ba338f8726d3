#!/usr/bin/env python3
"""Seed the movements and movement_aliases tables from the built-in catalog."""

import asyncio
import sys

from wodparse.catalog import DEFAULT_MOVEMENTS
from wodparse.database.connection import db_manager
from wodparse.database.repository import movement_repo


async def seed_movements():
    """Insert catalog movements that are not in the database yet."""
    print("Seeding movement data...")

    try:
        await db_manager.initialize()
        await db_manager.create_all()

        async with db_manager.get_session() as session:
            created = await movement_repo.seed(session, DEFAULT_MOVEMENTS)

        skipped = len(DEFAULT_MOVEMENTS) - created
        print(f"Created {created} movements, skipped {skipped} already present.")
        return True

    except Exception as e:
        print(f"Failed to seed movements: {e}")
        import traceback

        traceback.print_exc()
        return False
    finally:
        await db_manager.close()


if __name__ == "__main__":
    success = asyncio.run(seed_movements())
    sys.exit(0 if success else 1)
