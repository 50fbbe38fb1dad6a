"""
db/connection.py
----------------
Connection providers handed to repositories.

A provider owns one database connection, opened lazily on first use.
Repositories borrow it with `get_connection()` and hand it back with
`release_connection()` when the operation is finished.
"""

import sqlite3
from typing import Any, Protocol

import psycopg2

from config import DATABASE_URL
from utils.logger import get_logger

logger = get_logger(__name__)

SQLITE_URL_PREFIX = "sqlite:///"


class ConnectionProvider(Protocol):
    """What a Repository needs from the database layer."""

    placeholder: str

    def get_connection(self) -> Any: ...

    def release_connection(self, conn: Any) -> None: ...


class PostgresDatabase:
    """PostgreSQL provider backed by a single psycopg2 connection."""

    placeholder = "%s"

    def __init__(self, dsn: str = DATABASE_URL):
        self.dsn = dsn
        self._conn = None

    def get_connection(self):
        """
        Get the live connection, opening (or reopening) it if needed.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._conn is None or self._conn.closed:
            try:
                self._conn = psycopg2.connect(self.dsn)
                logger.info("PostgreSQL connection opened.")
            except psycopg2.OperationalError as e:
                logger.error(f"Failed to connect to PostgreSQL: {e}")
                raise
        return self._conn

    def release_connection(self, conn) -> None:
        """The provider keeps its connection open between operations."""

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None and not self._conn.closed:
            self._conn.close()
            logger.info("PostgreSQL connection closed.")
        self._conn = None


class SQLiteDatabase:
    """SQLite provider, used for local development and tests."""

    placeholder = "?"

    def __init__(self, path: str = ":memory:"):
        self.path = path
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.path)
            logger.info(f"SQLite connection opened: {self.path}")
        return self._conn

    def release_connection(self, conn: sqlite3.Connection) -> None:
        """The provider keeps its connection open between operations."""

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("SQLite connection closed.")


def connect(url: str = DATABASE_URL) -> PostgresDatabase | SQLiteDatabase:
    """
    Build the provider matching a database URL.

    Args:
        url: ``sqlite:///<path>`` for SQLite, anything else is passed to psycopg2.

    Returns:
        An unopened provider; the connection is made on first use.
    """
    if url.startswith(SQLITE_URL_PREFIX):
        return SQLiteDatabase(url[len(SQLITE_URL_PREFIX):] or ":memory:")
    return PostgresDatabase(url)
