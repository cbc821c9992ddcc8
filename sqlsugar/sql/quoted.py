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

"""Identifier quoting strategies for ``table_fn`` / ``column_fn``.

Usage::

    from sqlsugar.sql import find_by_keys, quoted

    find_by_keys(conn, "order", {"user": 1},
                 {"table_fn": quoted.ansi, "column_fn": quoted.ansi})
    # SELECT * FROM "order" WHERE "user" = ?
"""

from __future__ import annotations

from collections.abc import Callable

QuoteFn = Callable[[str], str]


def ansi(name: str) -> str:
    """ANSI SQL: ``"name"``."""
    return f'"{name}"'


def mysql(name: str) -> str:
    """MySQL: ``` `name` ```."""
    return f"`{name}`"


def sql_server(name: str) -> str:
    """SQL Server: ``[name]``."""
    return f"[{name}]"


oracle = ansi
postgres = ansi


def schema(quoting: QuoteFn) -> QuoteFn:
    """Wrap a quoting function so each dot-separated part is quoted.

    ``schema(ansi)("public.users")`` gives ``"public"."users"``.
    """

    def _quote(name: str) -> str:
        return ".".join(quoting(part) for part in name.split("."))

    return _quote
