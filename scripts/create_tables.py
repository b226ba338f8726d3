#!/usr/bin/env python3
"""Drop and recreate the movement dictionary tables.

Point ``WODPARSE_DATABASE__URL`` at the target database first. Run
``seed_movements.py`` afterwards to load the default catalog.
"""

import asyncio
import sys

from wodparse.database.connection import db_manager


async def reset_schema() -> bool:
    print(f"Resetting movement tables at {db_manager.settings.url}")

    try:
        await db_manager.initialize()
        await db_manager.create_all(drop_first=True)
        for name in await db_manager.table_names():
            print(f"  created {name}")
        return True

    except Exception as e:
        print(f"Schema reset failed: {e}")
        import traceback

        traceback.print_exc()
        return False
    finally:
        await db_manager.close()


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(reset_schema()) else 1)
