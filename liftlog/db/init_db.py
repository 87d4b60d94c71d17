"""
Database initialization.

Creates all tables.  Production deployments use the Alembic migrations
instead; this is for local development and tests.
"""

import logging

from sqlmodel import SQLModel

import liftlog.db.base  # noqa: F401
from liftlog.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all SQLModel tables that do not exist yet."""
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
