import sqlite3
from pathlib import Path
from typing import Any, Mapping, Optional

from sqlalchemy import MetaData, create_engine, event, text
from sqlalchemy.engine import URL, Connection, CursorResult, Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from kaati_ako.config import SQL_ECHO, resolve_db_path
from kaati_ako.exceptions import DatabaseFileNotFoundError, StorageError, ValueNotIntegerError
from kaati_ako.logging_config import get_logger

logger = get_logger(__name__)

# Naming convention for constraints, so drop/create is deterministic
INDEXES_NAMING_CONVENTION = {
    "ix": "%(column_0_label)s_idx",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "ck": "%(table_name)s_%(constraint_name)s_check",
    "fk": "%(table_name)s_%(column_0_name)s_fkey",
    "pk": "%(table_name)s_pkey",
}

metadata = MetaData(naming_convention=INDEXES_NAMING_CONVENTION)
Base = declarative_base(metadata=metadata)


def storage_error(err: SQLAlchemyError) -> StorageError:
    """Build a StorageError carrying the engine's own message."""
    if isinstance(err, DBAPIError) and err.orig is not None:
        return StorageError(str(err.orig))
    return StorageError(str(err))


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """Switch on foreign key enforcement for every new SQLite connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_engine(db_path: str, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine for the SQLite file at db_path.

    The file is not checked here; SQLite creates it on first connect, which is
    what bootstrapping relies on. Use get_connection() everywhere else.
    """
    engine = create_engine(
        URL.create("sqlite", database=db_path),
        echo=SQL_ECHO if echo is None else echo,
        isolation_level="AUTOCOMMIT",
        poolclass=NullPool,
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    return engine


def get_connection(db_path: Optional[str] = None) -> Connection:
    """
    Open a new connection to the database file.

    The path is the explicit argument, else the DB_PATH environment variable,
    else the default filename. A missing file is an error: the database is
    only ever created by the bootstrap in kaati_ako.seed.
    """
    path = resolve_db_path(db_path)
    if not path or not Path(path).exists():
        raise DatabaseFileNotFoundError(path)
    try:
        conn = create_db_engine(path).connect()
    except SQLAlchemyError as err:
        raise storage_error(err) from err
    logger.debug(f"Opened database connection to {path}")
    return conn


def execute(
        conn: Connection,
        statement: str,
        params: Optional[Mapping[str, Any]] = None) -> CursorResult:
    """Execute one fixed SQL statement with bound parameters."""
    logger.debug(f"Executing: {statement} {dict(params or {})}")
    try:
        return conn.execute(text(statement), dict(params or {}))
    except SQLAlchemyError as err:
        raise storage_error(err) from err


def last_insert_id(conn: Connection, table_name: str) -> int:
    """
    Get the identifier of the last inserted item in the given table.

    Only valid right after a single insert on the same, unshared connection.
    """
    row = execute(conn, f"SELECT last_insert_rowid() FROM {table_name} LIMIT 1").first()
    if row is None:
        return 0
    value = row[0]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueNotIntegerError()
    return value
