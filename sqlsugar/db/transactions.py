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

"""Transaction context manager.

The statement helpers never commit.  Wrap them in :func:`transaction` (or
use a connection in autocommit mode) to control when writes land.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlsugar.db.connection import is_sqlite

logger = logging.getLogger(__name__)


@contextmanager
def transaction(conn: Any) -> Generator[Any, None, None]:
    """Context manager that commits on success, rolls back on exception.

    Usage::

        with transaction(conn):
            insert(conn, "papers", {"doi": "10.1101/x"})
            update(conn, "papers", {"title": "A paper"}, {"doi": "10.1101/x"})
        # auto-committed here

    For SQLite, ``BEGIN`` is issued explicitly (unless the driver already
    opened a transaction) so that ``conn.commit()`` has a well-defined
    scope.  For PostgreSQL (psycopg2), autocommit is off by default so we
    simply call ``conn.commit()`` or ``conn.rollback()``.
    """
    if is_sqlite(conn) and not conn.in_transaction:
        conn.execute("BEGIN")

    try:
        yield conn
        conn.commit()
    except Exception:
        logger.debug("Rolling back transaction")
        conn.rollback()
        raise
