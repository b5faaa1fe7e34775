"""
Store connection management.

One engine and one connection per process: the connection is opened at
startup, held for the whole session and closed on shutdown.
"""
import logging

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from employee_tracker.config import Settings
from employee_tracker.core.exceptions import DatabaseConnectionError, StatementError

logger = logging.getLogger(__name__)

# Dialects with a catalog of databases (CREATE DATABASE / USE)
DATABASE_DIALECTS = ("mysql", "mariadb")


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    """SQLite only enforces foreign keys when asked to, per connection."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured store, in autocommit mode."""
    engine = create_async_engine(
        settings.url,
        isolation_level="AUTOCOMMIT",
        echo=False,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


async def connect(settings: Settings) -> AsyncConnection:
    """
    Open the store connection.

    Raises:
        DatabaseConnectionError: If the engine cannot be built or the store
            cannot be reached / rejects the credentials. Not retried.
    """
    engine = None
    try:
        engine = create_engine(settings)
        connection = await engine.connect()
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Could not connect to {settings.db_driver} store at {settings.db_host}: {e}")
        if engine is not None:
            await engine.dispose()
        raise DatabaseConnectionError(f"Could not connect to the store: {e}") from e

    logger.info(f"Connected to {engine.dialect.name} store")
    return connection


def supports_databases(connection: AsyncConnection) -> bool:
    return connection.dialect.name in DATABASE_DIALECTS


async def initialize_database(connection: AsyncConnection, database: str) -> None:
    """
    Create the database if it doesn't exist and make it the connection's
    current database. Safe to call on every startup.

    SQLite stores have no database catalog (the file is the database), so
    nothing is issued for them.
    """
    if not supports_databases(connection):
        logger.debug(f"{connection.dialect.name} store has no database catalog, skipping")
        return

    name = connection.dialect.identifier_preparer.quote(database)
    try:
        await connection.execute(text(f"CREATE DATABASE IF NOT EXISTS {name}"))
        logger.info(f"Ensured database {database}")
        await connection.execute(text(f"USE {name}"))
        logger.info(f"Using database {database}")
    except SQLAlchemyError as e:
        logger.error(f"Database initialization failed: {e}")
        raise StatementError(f"Could not initialize database {database!r}: {e}") from e


async def close_connection(connection: AsyncConnection) -> None:
    """Close the connection and dispose of its engine."""
    engine = connection.engine
    await connection.close()
    await engine.dispose()
