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

"""Thin database layer — pure functions over DB-API connections.

Supports SQLite (built-in) and PostgreSQL (optional, via psycopg2).

Usage::

    from sqlsugar.db import connect_sqlite, execute, execute_one, transaction

    conn = connect_sqlite("~/.myapp/data.db")
    with transaction(conn):
        execute(conn, ("INSERT INTO papers (doi, title) VALUES (?, ?)", ("10.1101/x", "A paper")))
    rows = execute(conn, "SELECT * FROM papers")
"""

from sqlsugar.db.connection import (
    connect_postgresql,
    connect_sqlite,
    is_sqlite,
    placeholder,
)
from sqlsugar.db.operations import (
    UPDATE_COUNT,
    as_lower_maps,
    as_maps,
    as_tuples,
    create_tables,
    execute,
    execute_one,
    table_exists,
)
from sqlsugar.db.transactions import transaction

__all__ = [
    "connect_sqlite",
    "connect_postgresql",
    "is_sqlite",
    "placeholder",
    "execute",
    "execute_one",
    "as_maps",
    "as_lower_maps",
    "as_tuples",
    "UPDATE_COUNT",
    "table_exists",
    "create_tables",
    "transaction",
]
