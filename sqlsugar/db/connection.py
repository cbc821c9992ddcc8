"""Database connection factories.

Each function returns a standard DB-API 2.0 connection, which is the
"connectable" every helper in :mod:`sqlsugar.sql` accepts.  SQLite uses the
built-in ``sqlite3`` module; PostgreSQL uses ``psycopg2`` (optional
dependency).

The helpers never close, commit or pool these connections -- their
lifecycle belongs to the caller.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DATABASE_URL_ENV_VAR = "DATABASE_URL"


def connect_sqlite(
    path: str | Path,
    *,
    wal_mode: bool = True,
    foreign_keys: bool = True,
) -> sqlite3.Connection:
    """Open (or create) a SQLite database and return a connection.

    Args:
        path: File path (``":memory:"`` for in-memory).
        wal_mode: Enable WAL journal mode for better concurrent access.
        foreign_keys: Enforce foreign key constraints.
    """
    path = str(Path(path).expanduser()) if path != ":memory:" else ":memory:"

    if path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row

    if wal_mode and path != ":memory:":
        conn.execute("PRAGMA journal_mode=WAL")
    if foreign_keys:
        conn.execute("PRAGMA foreign_keys=ON")

    logger.debug("SQLite connection opened: %s", path)
    return conn


def connect_postgresql(
    dsn: str | None = None,
    *,
    host: str = "localhost",
    port: int = 5432,
    database: str = "postgres",
    user: str = "postgres",
    password: str = "",
) -> Any:
    """Open a PostgreSQL connection via psycopg2.

    Either provide a full *dsn* string, set the ``DATABASE_URL``
    environment variable, or pass individual parameters.

    Returns:
        A ``psycopg2`` connection with ``RealDictCursor`` as the default
        cursor factory.
    """
    try:
        import psycopg2
        import psycopg2.extras
    except ImportError:
        raise ImportError(
            "psycopg2 not installed. Install with: pip install sqlsugar[postgresql]"
        )

    resolved_dsn = dsn or os.environ.get(DATABASE_URL_ENV_VAR)
    if resolved_dsn:
        conn = psycopg2.connect(
            resolved_dsn, cursor_factory=psycopg2.extras.RealDictCursor,
        )
        logger.debug("PostgreSQL connection opened from DSN")
    else:
        conn = psycopg2.connect(
            host=host,
            port=port,
            database=database,
            user=user,
            password=password,
            cursor_factory=psycopg2.extras.RealDictCursor,
        )
        logger.debug("PostgreSQL connection opened: %s:%s/%s", host, port, database)
    return conn


def is_sqlite(conn: Any) -> bool:
    """Return True if the connection is SQLite."""
    return isinstance(conn, sqlite3.Connection)


def placeholder(conn: Any) -> str:
    """Return the parameter placeholder for this connection.

    ``?`` (qmark) for sqlite3, ``%s`` (format) for psycopg2 and the other
    common drivers.
    """
    return "?" if is_sqlite(conn) else "%s"
