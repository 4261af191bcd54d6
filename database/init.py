"""
Database Initialization

Applies the Alembic migrations at startup.
"""
from loguru import logger


def run_migrations() -> None:
    """
    Run pending Alembic migrations.

    This is a convenience wrapper around Alembic upgrade command.
    """
    from alembic.config import Config
    from alembic import command
    from config import settings

    alembic_cfg = Config(str(settings.BASE_DIR / "alembic.ini"))
    command.upgrade(alembic_cfg, "head")
    logger.info("Database migrations completed")
