import logging
from sqlalchemy import inspect
from app.database.base import Base
from app.database.session import engine
from app import models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)

def create_tables(bind=None):
    """
    Creates any missing tables for the mapped models.
    Existing tables are left as they are; schema changes go through Alembic.

    Returns:
        list: Names of the tables that were missing before the call
    """
    bind = bind or engine
    existing = set(inspect(bind).get_table_names())
    missing = [name for name in Base.metadata.tables if name not in existing]

    if missing:
        logger.info("⚙️ Creating tables: %s", ", ".join(sorted(missing)))
        Base.metadata.create_all(bind=bind)
        logger.info("✅ Database schema ready")
    else:
        logger.info("ℹ️ All tables already exist")
    return missing
