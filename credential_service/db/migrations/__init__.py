"""
Database migration runner.

Version: 1.0
"""

import os
import importlib
import logging
from typing import List
from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)

def list_migrations() -> List[str]:
    """Migration module names in execution order."""
    return sorted(
        f[:-3] for f in os.listdir(os.path.dirname(__file__))
        if f.endswith('.py') and f != '__init__.py'
    )

async def run_migrations(db: AsyncIOMotorDatabase, direction: str = "up") -> bool:
    """
    Run all database migrations in sequence.

    Args:
        db: AsyncIOMotorDatabase instance
        direction: Migration direction ("up" or "down")

    Returns:
        bool: True if all migrations successful, False otherwise
    """
    if direction not in ("up", "down"):
        raise ValueError(f"Unknown migration direction: {direction}")

    migrations = list_migrations()
    if direction == "down":
        migrations.reverse()

    for migration in migrations:
        migration_module = importlib.import_module(f"{__name__}.{migration}")
        func = getattr(migration_module, "upgrade" if direction == "up" else "downgrade")

        logger.info(f"Running migration {migration}")
        if not await func(db):
            logger.error(f"Migration {migration} failed")
            return False

        logger.info(f"Successfully completed migration {migration}")

    return True
