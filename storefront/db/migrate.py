"""Programmatic Alembic upgrade used when ``DB_SYNC`` is enabled."""
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)

# storefront/db/migrate.py -> project root holding alembic.ini
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def alembic_config(database_url: str | None = None) -> Config:
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    # Keep the service's logging setup instead of alembic.ini's
    cfg.attributes["configure_logger"] = False
    if database_url:
        cfg.attributes["database_url"] = database_url
    return cfg


def upgrade_to_head(database_url: str | None = None) -> None:
    logger.info("Running database migrations to head")
    command.upgrade(alembic_config(database_url), "head")
    logger.info("Database migrations complete")
