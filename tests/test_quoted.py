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

"""Tests for sqlsugar.sql.quoted."""

from __future__ import annotations

from sqlsugar.sql import quoted


def test_ansi():
    assert quoted.ansi("user") == '"user"'


def test_mysql():
    assert quoted.mysql("user") == "`user`"


def test_sql_server():
    assert quoted.sql_server("user") == "[user]"


def test_aliases():
    assert quoted.oracle is quoted.ansi
    assert quoted.postgres is quoted.ansi


def test_schema_quotes_each_part():
    assert quoted.schema(quoted.mysql)("app.users") == "`app`.`users`"
    assert quoted.schema(quoted.ansi)("users") == '"users"'
