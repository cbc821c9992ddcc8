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

"""Table/column/value helpers that build SQL and hand it to the executor.

Usage::

    from sqlsugar.db import connect_sqlite, transaction
    from sqlsugar.sql import find_by_keys, get_by_id, insert

    conn = connect_sqlite(":memory:")
    with transaction(conn):
        key = insert(conn, "users", {"name": "Ada", "email": "ada@example.org"})
    get_by_id(conn, "users", key["id"])
    find_by_keys(conn, "users", {"name": "Ada"}, {"order_by": [("email", "desc")]})
"""

from sqlsugar.sql import quoted
from sqlsugar.sql.builder import (
    for_delete,
    for_insert,
    for_insert_multi,
    for_order,
    for_query,
    for_update,
)
from sqlsugar.sql.helpers import (
    delete,
    find_by_keys,
    get_by_id,
    insert,
    insert_multi,
    query,
    update,
)
from sqlsugar.sql.models import ASC, DESC, ByKeys, Statement, Where, as_where

__all__ = [
    "insert",
    "insert_multi",
    "query",
    "find_by_keys",
    "get_by_id",
    "update",
    "delete",
    "for_insert",
    "for_insert_multi",
    "for_query",
    "for_update",
    "for_delete",
    "for_order",
    "Statement",
    "ByKeys",
    "Where",
    "as_where",
    "ASC",
    "DESC",
    "quoted",
]
