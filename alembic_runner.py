"""
Alembic migration runner for application startup.
"""
import logging
from pathlib import Path
from sqlalchemy.exc import OperationalError
from alembic import command
from alembic.config import Config
from database import DATABASE_URL

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


def _alembic_config() -> Config:
    alembic_cfg = Config(str(BASE_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(BASE_DIR / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", DATABASE_URL)
    return alembic_cfg


def run_migrations() -> None:
    """
    Run Alembic migrations to head.
    Called during application startup to ensure database is up to date.
    """
    try:
        logger.info("Running Alembic migrations...")
        command.upgrade(_alembic_config(), "head")
        logger.info("Alembic migrations completed successfully")
    except OperationalError as e:
        logger.error(f"Failed to connect to database during migrations: {e}")
        raise


def get_current_revision() -> str:
    """
    Get the current database revision.
    Returns the revision string or 'None' if no migrations have been applied.
    """
    from alembic.runtime.migration import MigrationContext
    from database import engine

    try:
        with engine.connect() as connection:
            context = MigrationContext.configure(connection)
            current_rev = context.get_current_revision()
            return current_rev if current_rev else 'None'
    except OperationalError as e:
        logger.error(f"Failed to get current revision: {e}")
        return 'Unknown'
