"""
Migration Runner

Applies the Alembic migration scripts embedded in the package
(``shorturl/migrations``) up to head.

Two entry points:
- run_migrations_async(engine): used on startup. Migrations run over a
  connection of the application's own engine, so in-memory SQLite (one
  static connection) gets its tables where the app will look for them.
- run_migrations(database_url): standalone, with a throwaway sync engine;
  for preparing a database outside the running service (tests, scripts).
"""

import logging

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

from shorturl.core.setting import BASE_DIR

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = BASE_DIR / "migrations"


def get_alembic_config(database_url: str) -> Config:
    """
    Build an Alembic config pointing at the embedded scripts.

    Args:
        database_url: Application (async) database URL

    Returns:
        Alembic Config with script_location and sqlalchemy.url set
    """
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation treats '%' as special
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def run_migrations(database_url: str, revision: str = "head") -> None:
    """
    Upgrade the database to the given revision.

    Raises:
        Whatever Alembic or the driver raises.
    """
    logger.info(f"Applying database migrations up to '{revision}'")
    command.upgrade(get_alembic_config(database_url), revision)
    logger.info("Database migrations applied")


def upgrade_connection(connection: Connection, revision: str = "head") -> None:
    """Upgrade through an already open sync connection (env.py reuses it)."""
    config = get_alembic_config(
        connection.engine.url.render_as_string(hide_password=False)
    )
    config.attributes["connection"] = connection
    command.upgrade(config, revision)


async def run_migrations_async(engine: AsyncEngine, revision: str = "head") -> None:
    """
    Upgrade the database behind an async engine, on one of its own connections.

    Raises:
        Whatever Alembic or the driver raises; a failed migration aborts startup.
    """
    logger.info(f"Applying database migrations up to '{revision}'")
    async with engine.begin() as connection:
        await connection.run_sync(upgrade_connection, revision)
    logger.info("Database migrations applied")
