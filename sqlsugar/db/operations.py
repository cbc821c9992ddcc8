# sqlsugar — syntactic sugar over DB-API statement execution
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Statement execution — pure functions over DB-API connections.

:func:`execute` and :func:`execute_one` take a connection and a
``(sql, params)`` pair (a :class:`~sqlsugar.sql.models.Statement`, any
two-item sequence, or a bare SQL string) and return materialised rows.
SQL is passed through as-is; callers (or the builder in
:mod:`sqlsugar.sql.builder`) are responsible for backend-appropriate
placeholders (``?`` for SQLite, ``%s`` for PostgreSQL).

Recognised options:

* ``builder_fn`` -- ``(columns, row) -> Any`` used to materialise each row
  (default :func:`as_maps`),
* ``return_keys`` -- for INSERT statements, append ``RETURNING *`` (or
  ``RETURNING <cols>`` when given a sequence of column names, each passed
  through ``column_fn`` when set) so the generated keys come back as rows.

Statements that produce no result set return ``{UPDATE_COUNT: n}``.
Nothing here commits -- see :func:`sqlsugar.db.transaction`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlsugar.db.connection import is_sqlite

logger = logging.getLogger(__name__)

UPDATE_COUNT = "update_count"

_INSERT_RE = re.compile(r"^\s*INSERT\b", re.IGNORECASE)
_RETURNING_RE = re.compile(r"\bRETURNING\b", re.IGNORECASE)

RowBuilder = Callable[[Sequence[str], Any], Any]


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------


def as_maps(columns: Sequence[str], row: Any) -> dict[str, Any]:
    """Build a ``dict`` keyed by column label."""
    # psycopg2 RealDictRow is already a mapping; sqlite3.Row iterates values.
    if isinstance(row, Mapping):
        return dict(row)
    return dict(zip(columns, row))


def as_lower_maps(columns: Sequence[str], row: Any) -> dict[str, Any]:
    """Like :func:`as_maps` but with lower-cased column labels."""
    return {k.lower(): v for k, v in as_maps(columns, row).items()}


def as_tuples(columns: Sequence[str], row: Any) -> tuple:
    """Build a plain tuple in column order."""
    if isinstance(row, Mapping):
        return tuple(row[c] for c in columns)
    return tuple(row)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _split(sql_params: Any) -> tuple[str, Sequence]:
    """Unpack a statement into its SQL string and parameter sequence."""
    if isinstance(sql_params, str):
        return sql_params, ()
    sql, params = sql_params
    return sql, tuple(params)


def _with_returning(sql: str, opts: Mapping[str, Any]) -> str:
    """Append a RETURNING clause to INSERTs when ``return_keys`` asks for it."""
    return_keys = opts.get("return_keys")
    if not return_keys or not _INSERT_RE.match(sql) or _RETURNING_RE.search(sql):
        return sql
    if return_keys is True:
        return f"{sql} RETURNING *"
    column_fn = opts.get("column_fn") or (lambda name: name)
    return f"{sql} RETURNING {', '.join(column_fn(k) for k in return_keys)}"


def _run(conn: Any, sql_params: Any, opts: Mapping[str, Any]) -> Any:
    sql, params = _split(sql_params)
    sql = _with_returning(sql, opts)
    logger.debug("Executing: %s (%d params)", sql, len(params))
    cur = conn.cursor()
    cur.execute(sql, params)
    return cur


def _columns(cur: Any) -> list[str]:
    return [d[0] for d in cur.description]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def execute(
    conn: Any, sql_params: Any, opts: Mapping[str, Any] | None = None,
) -> list[Any]:
    """Execute a statement and return all resulting rows.

    For statements without a result set the list holds a single
    ``{UPDATE_COUNT: rowcount}`` entry.
    """
    opts = opts or {}
    cur = _run(conn, sql_params, opts)
    if cur.description is None:
        return [{UPDATE_COUNT: cur.rowcount}]
    builder: RowBuilder = opts.get("builder_fn") or as_maps
    columns = _columns(cur)
    return [builder(columns, row) for row in cur.fetchall()]


def execute_one(
    conn: Any, sql_params: Any, opts: Mapping[str, Any] | None = None,
) -> Any:
    """Execute a statement and return the first resulting row, or ``None``."""
    opts = opts or {}
    cur = _run(conn, sql_params, opts)
    if cur.description is None:
        return {UPDATE_COUNT: cur.rowcount}
    row = cur.fetchone()
    # Reset the statement so an INSERT ... RETURNING does not block COMMIT.
    cur.close()
    if row is None:
        return None
    builder: RowBuilder = opts.get("builder_fn") or as_maps
    return builder(_columns(cur), row)


def table_exists(conn: Any, name: str) -> bool:
    """Check whether a table exists (works on both SQLite and PostgreSQL)."""
    if is_sqlite(conn):
        sql = "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?"
    else:
        sql = "SELECT 1 FROM information_schema.tables WHERE table_name=%s"
    return execute_one(conn, (sql, (name,))) is not None


def create_tables(conn: Any, schema_sql: str) -> None:
    """Execute a (possibly multi-statement) schema DDL string.

    For SQLite the entire string is executed via ``executescript()``.
    For PostgreSQL the string is sent in one ``execute()`` and committed.
    """
    if is_sqlite(conn):
        conn.executescript(schema_sql)
    else:
        cur = conn.cursor()
        cur.execute(schema_sql)
        conn.commit()
