"""Database connection and schema setup."""

import logging
import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tasksservice.models import Base

logger = logging.getLogger(__name__)


class DatabaseConfigError(RuntimeError):
    """Raised when no database location is configured."""


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_db(dsn: str | None = None) -> Engine:
    """Connect to the database and create the schema.

    ``dsn`` falls back to the ``DATABASE_URL`` environment variable.
    """
    dsn = dsn or os.environ.get("DATABASE_URL", "")
    if not dsn:
        logger.error("DATABASE_URL is not set")
        raise DatabaseConfigError("DATABASE_URL is not set")

    try:
        engine = create_engine(dsn)
    except (SQLAlchemyError, ValueError) as exc:
        logger.error("Failed to connect to database: %s", exc)
        raise

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        logger.error("Failed to auto-migrate models: %s", exc)
        raise

    logger.info("Successfully connected to database")
    return engine