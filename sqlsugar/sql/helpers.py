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

"""Syntactic sugar over :func:`execute` / :func:`execute_one`.

Each helper builds a statement with :mod:`sqlsugar.sql.builder` and hands
it, together with the caller's options, to the executor.  Nothing is
retried, wrapped or committed: builder errors (``ValueError`` /
``TypeError``) surface before any SQL runs, driver errors surface as the
driver raised them.

Options understood by every helper:

* ``table_fn`` -- function converting table names to SQL entity names,
* ``column_fn`` -- function converting column names to SQL entity names
  (see :mod:`sqlsugar.sql.quoted` for the common quoting strategies).

``find_by_keys`` and ``get_by_id`` also take ``order_by``, ``columns``,
``limit`` and ``offset``.  Any other key is passed through to the
executor untouched.

For anything more complex, build the SQL yourself and call :func:`query`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlsugar.db.connection import placeholder
from sqlsugar.db.operations import execute, execute_one
from sqlsugar.sql.builder import (
    for_delete,
    for_insert,
    for_insert_multi,
    for_query,
    for_update,
)

logger = logging.getLogger(__name__)

_INSERT_DEFAULTS = {"return_keys": True}


def _merge(defaults: Mapping[str, Any], opts: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return *defaults* overlaid with *opts*; caller values win."""
    return {**defaults, **(opts or {})}


def _builder_opts(connectable: Any, opts: Mapping[str, Any]) -> Mapping[str, Any]:
    """Add the connection's placeholder style unless the caller chose one."""
    if "placeholder" in opts:
        return opts
    return {"placeholder": placeholder(connectable), **opts}


def insert(
    connectable: Any,
    table: str,
    key_map: Mapping[str, Any],
    opts: Mapping[str, Any] | None = None,
) -> dict[str, Any] | None:
    """Insert *key_map* as a single row and return its generated keys.

    The key-map's keys become the column list and its values the row.
    ``return_keys`` defaults to ``True``; pass ``{"return_keys": False}``
    to get the ``{UPDATE_COUNT: n}`` summary instead.
    """
    opts = _merge(_INSERT_DEFAULTS, opts)
    stmt = for_insert(table, key_map, _builder_opts(connectable, opts))
    return execute_one(connectable, stmt, opts)


def insert_multi(
    connectable: Any,
    table: str,
    cols: Sequence[str],
    rows: Sequence[Sequence[Any]],
    opts: Mapping[str, Any] | None = None,
) -> list[Any]:
    """Insert *rows* (sequences of values ordered like *cols*) in one statement.

    Returns the generated keys for every row (``return_keys`` defaults to
    ``True``).  With no rows nothing is executed and ``[]`` is returned.

    Note: this expands to a single SQL statement with a placeholder for
    every value being inserted -- for large sets of rows this may exceed
    the driver's or database's limits on SQL size or parameter count
    (SQLite's default is 32766 parameters).  Split the rows yourself if
    that matters.
    """
    if not rows:
        logger.debug("insert_multi into %s: no rows, nothing to execute", table)
        return []
    opts = _merge(_INSERT_DEFAULTS, opts)
    stmt = for_insert_multi(table, cols, rows, _builder_opts(connectable, opts))
    return execute(connectable, stmt, opts)


def query(
    connectable: Any,
    sql_params: Any,
    opts: Mapping[str, Any] | None = None,
) -> list[Any]:
    """Alias for :func:`execute` on a pre-built ``(sql, params)`` pair."""
    return execute(connectable, sql_params, opts or {})


def find_by_keys(
    connectable: Any,
    table: str,
    where: Any,
    opts: Mapping[str, Any] | None = None,
) -> list[Any]:
    """Return every row of *table* matching *where*.

    *where* is either a mapping of column -> value (AND-ed equality, with
    ``None`` meaning ``IS NULL``; an empty mapping matches every row) or a
    ``(fragment, params)`` pair such as ``("age > ?", [18])``.

    ``order_by`` is a sequence of column names or ``(column, direction)``
    pairs, direction being ``"asc"`` or ``"desc"``.
    """
    opts = _merge({}, opts)
    stmt = for_query(table, where, _builder_opts(connectable, opts))
    return execute(connectable, stmt, opts)


def get_by_id(connectable: Any, table: str, pk: Any, *args: Any) -> dict[str, Any] | None:
    """Return the first row whose primary key equals *pk*, or ``None``.

    Three call shapes are accepted::

        get_by_id(conn, table, pk)
        get_by_id(conn, table, pk, opts)
        get_by_id(conn, table, pk, pk_name, opts)

    The primary key column defaults to ``"id"``; naming a different column
    requires the five-argument form, so a lone fourth argument is always
    the options mapping.
    """
    if not args:
        pk_name, opts = "id", {}
    elif len(args) == 1:
        pk_name, opts = "id", args[0]
        if opts is None:
            opts = {}
        if not isinstance(opts, Mapping):
            raise TypeError(
                "get_by_id(conn, table, pk, opts) expects opts to be a mapping; "
                "pass get_by_id(conn, table, pk, pk_name, opts) to name the key column"
            )
    elif len(args) == 2:
        pk_name, opts = args
    else:
        raise TypeError(
            f"get_by_id() takes 3 to 5 positional arguments but {3 + len(args)} were given"
        )

    opts = _merge({}, opts)
    stmt = for_query(table, {pk_name: pk}, _builder_opts(connectable, opts))
    return execute_one(connectable, stmt, opts)


def update(
    connectable: Any,
    table: str,
    key_map: Mapping[str, Any],
    where: Any,
    opts: Mapping[str, Any] | None = None,
) -> Any:
    """Set the columns in *key_map* on every row matching *where*.

    *where* takes the same shapes as in :func:`find_by_keys`, except that
    an empty mapping is rejected.  Returns ``{UPDATE_COUNT: n}``.
    """
    opts = _merge({}, opts)
    stmt = for_update(table, key_map, where, _builder_opts(connectable, opts))
    return execute_one(connectable, stmt, opts)


def delete(
    connectable: Any,
    table: str,
    where: Any,
    opts: Mapping[str, Any] | None = None,
) -> Any:
    """Delete every row matching *where*; returns ``{UPDATE_COUNT: n}``."""
    opts = _merge({}, opts)
    stmt = for_delete(table, where, _builder_opts(connectable, opts))
    return execute_one(connectable, stmt, opts)
