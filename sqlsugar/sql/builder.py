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

"""SQL statement builder — pure functions from arguments to :class:`Statement`.

Every function here is deterministic and side-effect free: the same table,
columns, values and options always produce the same SQL and parameters.
Malformed arguments raise ``ValueError`` / ``TypeError`` before any SQL
string is produced.

Options read by the builder:

* ``table_fn`` / ``column_fn`` -- applied to every table / column name
  emitted (see :mod:`sqlsugar.sql.quoted`),
* ``placeholder`` -- parameter marker, ``?`` by default,
* ``order_by`` -- ``["a", ("b", "desc")]`` style ORDER BY list (queries),
* ``columns`` -- SELECT list, ``"col"`` or ``("col", "alias")`` (queries),
* ``limit`` / ``offset`` -- bound as parameters (queries),
* ``suffix`` -- raw SQL appended to the statement.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlsugar.sql.models import DIRECTIONS, ByKeys, Statement, Where, as_where

Opts = Mapping[str, Any]

_EMPTY: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Identifiers and fragments
# ---------------------------------------------------------------------------


def _table(table: str, opts: Opts) -> str:
    table_fn = opts.get("table_fn")
    return table_fn(table) if table_fn else table


def _column(column: str, opts: Opts) -> str:
    column_fn = opts.get("column_fn")
    return column_fn(column) if column_fn else column


def _placeholder(opts: Opts) -> str:
    return opts.get("placeholder") or "?"


def as_placeholders(n: int, opts: Opts | None = None) -> str:
    """Return ``n`` comma-separated parameter placeholders."""
    return ", ".join([_placeholder(opts or _EMPTY)] * n)


def as_keys(key_map: Mapping[str, Any], opts: Opts | None = None) -> str:
    """Return the key-map's column names, transformed and comma-separated."""
    opts = opts or _EMPTY
    return ", ".join(_column(k, opts) for k in key_map)


def as_cols(cols: Sequence[Any], opts: Opts | None = None) -> str:
    """Return a column list; ``(column, alias)`` pairs become ``column AS alias``."""
    opts = opts or _EMPTY
    out = []
    for col in cols:
        if isinstance(col, (tuple, list)):
            name, alias = col
            out.append(f"{_column(name, opts)} AS {_column(alias, opts)}")
        else:
            out.append(_column(col, opts))
    return ", ".join(out)


def by_keys(
    key_map: Mapping[str, Any], clause: str, opts: Opts | None = None,
) -> tuple[str, tuple]:
    """Render a key-map as a ``WHERE`` or ``SET`` clause.

    ``WHERE`` joins equality predicates with ``AND`` and turns ``None``
    values into ``IS NULL`` (no parameter).  ``SET`` joins assignments with
    commas and binds ``None`` like any other value.

    Returns:
        ``(sql_fragment, params)``.
    """
    opts = opts or _EMPTY
    clause = clause.upper()
    if clause not in ("WHERE", "SET"):
        raise ValueError(f"clause must be WHERE or SET, got {clause!r}")
    if not key_map:
        raise ValueError(f"key_map for {clause} may not be empty")

    ph = _placeholder(opts)
    parts: list[str] = []
    params: list[Any] = []
    for key, value in key_map.items():
        col = _column(key, opts)
        if value is None and clause == "WHERE":
            parts.append(f"{col} IS NULL")
        else:
            parts.append(f"{col} = {ph}")
            params.append(value)

    joiner = " AND " if clause == "WHERE" else ", "
    return f"{clause} {joiner.join(parts)}", tuple(params)


def _where(where: Any, opts: Opts, *, allow_empty: bool) -> tuple[str, tuple]:
    clause = as_where(where)
    if isinstance(clause, ByKeys):
        if allow_empty and not clause.key_map:
            return "", ()
        return by_keys(clause.key_map, "WHERE", opts)
    if isinstance(clause, Where):
        return f"WHERE {clause.fragment}", clause.params
    raise TypeError(f"unhandled where clause {clause!r}")


def for_order_col(col: Any, opts: Opts | None = None) -> str:
    """Render one ORDER BY element: ``"col"`` or ``("col", "asc"|"desc")``."""
    opts = opts or _EMPTY
    if isinstance(col, str):
        return _column(col, opts)
    if isinstance(col, (tuple, list)) and len(col) == 2:
        name, direction = col
        if not isinstance(direction, str) or direction.lower() not in DIRECTIONS:
            raise ValueError(
                f"order_by direction must be 'asc' or 'desc', got {direction!r}"
            )
        return f"{_column(name, opts)} {direction.upper()}"
    raise TypeError(
        f"order_by element must be a column name or (column, direction), got {col!r}"
    )


def for_order(opts: Opts | None = None) -> str:
    """Return the ORDER BY clause for ``opts["order_by"]``, or ``""``."""
    opts = opts or _EMPTY
    order_by = opts.get("order_by")
    if not order_by:
        return ""
    if isinstance(order_by, str):
        raise TypeError("order_by must be a sequence of columns, not a string")
    return "ORDER BY " + ", ".join(for_order_col(col, opts) for col in order_by)


def _finish(parts: list[str], params: Sequence[Any], opts: Opts) -> Statement:
    suffix = opts.get("suffix")
    if suffix:
        parts.append(suffix)
    return Statement(" ".join(p for p in parts if p), tuple(params))


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


def for_insert(
    table: str, key_map: Mapping[str, Any], opts: Opts | None = None,
) -> Statement:
    """``INSERT INTO table (k1, k2) VALUES (?, ?)`` for a single row."""
    opts = opts or _EMPTY
    if not key_map:
        raise ValueError("key_map for INSERT may not be empty")
    parts = [
        f"INSERT INTO {_table(table, opts)}",
        f"({as_keys(key_map, opts)})",
        f"VALUES ({as_placeholders(len(key_map), opts)})",
    ]
    return _finish(parts, list(key_map.values()), opts)


def for_insert_multi(
    table: str,
    cols: Sequence[str],
    rows: Sequence[Sequence[Any]],
    opts: Opts | None = None,
) -> Statement:
    """One INSERT with a single VALUES clause holding every row.

    Parameters are flattened row by row.  Every row must have exactly
    ``len(cols)`` values.
    """
    opts = opts or _EMPTY
    if not cols:
        raise ValueError("cols for INSERT may not be empty")
    if not rows:
        raise ValueError("rows for INSERT may not be empty")
    for i, row in enumerate(rows):
        if len(row) != len(cols):
            raise ValueError(
                f"row {i} has {len(row)} values, expected {len(cols)}"
            )

    tuple_sql = f"({as_placeholders(len(cols), opts)})"
    parts = [
        f"INSERT INTO {_table(table, opts)}",
        f"({as_cols(cols, opts)})",
        "VALUES " + ", ".join([tuple_sql] * len(rows)),
    ]
    return _finish(parts, [v for row in rows for v in row], opts)


def for_query(table: str, where: Any, opts: Opts | None = None) -> Statement:
    """``SELECT ... FROM table [WHERE ...] [ORDER BY ...] [LIMIT ?] [OFFSET ?]``.

    An empty key-map selects every row.
    """
    opts = opts or _EMPTY
    columns = opts.get("columns")
    select = as_cols(columns, opts) if columns else "*"
    where_sql, where_params = _where(where, opts, allow_empty=True)

    params = list(where_params)
    parts = [f"SELECT {select} FROM {_table(table, opts)}", where_sql, for_order(opts)]
    ph = _placeholder(opts)
    if opts.get("limit") is not None:
        parts.append(f"LIMIT {ph}")
        params.append(opts["limit"])
    if opts.get("offset") is not None:
        parts.append(f"OFFSET {ph}")
        params.append(opts["offset"])
    return _finish(parts, params, opts)


def for_update(
    table: str,
    key_map: Mapping[str, Any],
    where: Any,
    opts: Opts | None = None,
) -> Statement:
    """``UPDATE table SET k = ? ... WHERE ...``."""
    opts = opts or _EMPTY
    set_sql, set_params = by_keys(key_map, "SET", opts)
    where_sql, where_params = _where(where, opts, allow_empty=False)
    parts = [f"UPDATE {_table(table, opts)}", set_sql, where_sql]
    return _finish(parts, set_params + where_params, opts)


def for_delete(table: str, where: Any, opts: Opts | None = None) -> Statement:
    """``DELETE FROM table WHERE ...``."""
    opts = opts or _EMPTY
    where_sql, where_params = _where(where, opts, allow_empty=False)
    parts = [f"DELETE FROM {_table(table, opts)}", where_sql]
    return _finish(parts, where_params, opts)
