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

"""Tests for sqlsugar.db — connection, executor, and transactions."""

from __future__ import annotations

import sqlite3

import pytest

from sqlsugar.db import (
    UPDATE_COUNT,
    as_lower_maps,
    as_maps,
    as_tuples,
    connect_sqlite,
    create_tables,
    execute,
    execute_one,
    placeholder,
    table_exists,
    transaction,
)
from sqlsugar.sql.models import Statement


class AuditedConnection(sqlite3.Connection):
    """A sqlite3 connection subclass, as made by ``sqlite3.connect(factory=...)``."""


def _mem_conn():
    conn = connect_sqlite(":memory:")
    create_tables(conn, "CREATE TABLE t (id INTEGER PRIMARY KEY, val TEXT);")
    return conn


class TestConnection:
    def test_sqlite_memory(self):
        conn = connect_sqlite(":memory:")
        assert conn is not None
        conn.close()

    def test_sqlite_file_creates_parent_dir(self, tmp_path):
        path = tmp_path / "nested" / "data.db"
        conn = connect_sqlite(path)
        assert path.parent.is_dir()
        conn.close()

    def test_placeholder(self):
        assert placeholder(connect_sqlite(":memory:")) == "?"
        assert placeholder(object()) == "%s"

    def test_connection_subclass_is_sqlite(self):
        conn = sqlite3.connect(":memory:", factory=AuditedConnection)
        assert placeholder(conn) == "?"


class TestExecute:
    def test_bare_sql_string(self):
        conn = _mem_conn()
        assert execute(conn, "SELECT * FROM t") == []

    def test_insert_without_return_keys_gives_update_count(self):
        conn = _mem_conn()
        result = execute(conn, ("INSERT INTO t (val) VALUES (?)", ["hello"]))
        assert result == [{UPDATE_COUNT: 1}]

    def test_return_keys_appends_returning(self):
        conn = _mem_conn()
        rows = execute(
            conn,
            Statement("INSERT INTO t (val) VALUES (?), (?)", ("a", "b")),
            {"return_keys": True},
        )
        assert sorted(r["val"] for r in rows) == ["a", "b"]
        assert all("id" in r for r in rows)

    def test_return_keys_with_column_names(self):
        conn = _mem_conn()
        rows = execute(
            conn, ("INSERT INTO t (val) VALUES (?)", ("a",)), {"return_keys": ["id"]},
        )
        assert rows == [{"id": 1}]

    def test_return_keys_column_names_use_column_fn(self):
        conn = connect_sqlite(":memory:")
        create_tables(conn, 'CREATE TABLE t (id INTEGER PRIMARY KEY, "group" TEXT);')
        rows = execute(
            conn, ('INSERT INTO t ("group") VALUES (?)', ("a",)),
            {"return_keys": ["group"], "column_fn": lambda c: f'"{c}"'},
        )
        assert rows == [{"group": "a"}]

    def test_return_keys_ignored_for_non_insert(self):
        conn = _mem_conn()
        execute(conn, ("INSERT INTO t (val) VALUES (?)", ("a",)))
        result = execute(
            conn, ("UPDATE t SET val = ? WHERE id = ?", ("b", 1)), {"return_keys": True},
        )
        assert result == [{UPDATE_COUNT: 1}]

    def test_select_rows_as_maps(self):
        conn = _mem_conn()
        execute(conn, ("INSERT INTO t (val) VALUES (?)", ("hello",)))
        assert execute(conn, "SELECT id, val FROM t") == [{"id": 1, "val": "hello"}]

    def test_builder_fn_tuples(self):
        conn = _mem_conn()
        execute(conn, ("INSERT INTO t (val) VALUES (?)", ("x",)))
        rows = execute(conn, "SELECT id, val FROM t", {"builder_fn": as_tuples})
        assert rows == [(1, "x")]

    def test_builder_fn_lower_maps(self):
        conn = _mem_conn()
        execute(conn, ("INSERT INTO t (val) VALUES (?)", ("x",)))
        rows = execute(conn, "SELECT val AS VAL FROM t", {"builder_fn": as_lower_maps})
        assert rows == [{"val": "x"}]

    def test_driver_errors_propagate(self):
        conn = _mem_conn()
        with pytest.raises(sqlite3.OperationalError):
            execute(conn, "SELECT * FROM missing")


class TestExecuteOne:
    def test_returns_first_row(self):
        conn = _mem_conn()
        execute(conn, ("INSERT INTO t (val) VALUES (?), (?)", ("a", "b")))
        row = execute_one(conn, "SELECT val FROM t ORDER BY val")
        assert row == {"val": "a"}

    def test_returns_none(self):
        conn = _mem_conn()
        assert execute_one(conn, ("SELECT * FROM t WHERE id = ?", (999,))) is None

    def test_update_count(self):
        conn = _mem_conn()
        execute(conn, ("INSERT INTO t (val) VALUES (?), (?)", ("a", "a")))
        result = execute_one(conn, ("DELETE FROM t WHERE val = ?", ("a",)))
        assert result == {UPDATE_COUNT: 2}

    def test_insert_returning_then_commit(self):
        conn = _mem_conn()
        row = execute_one(
            conn, ("INSERT INTO t (val) VALUES (?)", ("k",)), {"return_keys": True},
        )
        conn.commit()
        assert row == {"id": 1, "val": "k"}


class TestRowBuilders:
    def test_as_maps_from_mapping_row(self):
        assert as_maps(["a"], {"a": 1}) == {"a": 1}

    def test_as_maps_from_sequence_row(self):
        assert as_maps(["a", "b"], (1, 2)) == {"a": 1, "b": 2}

    def test_as_tuples_from_mapping_row(self):
        assert as_tuples(["b", "a"], {"a": 1, "b": 2}) == (2, 1)


class TestSchemaHelpers:
    def test_create_and_table_exists(self):
        conn = connect_sqlite(":memory:")
        create_tables(conn, "CREATE TABLE IF NOT EXISTS t (id INTEGER PRIMARY KEY);")
        assert table_exists(conn, "t")
        assert not table_exists(conn, "nonexistent")

    def test_table_exists_on_connection_subclass(self):
        conn = sqlite3.connect(":memory:", factory=AuditedConnection)
        create_tables(conn, "CREATE TABLE t (id INTEGER PRIMARY KEY);")
        assert table_exists(conn, "t")


class TestTransaction:
    def test_commit_on_success(self):
        conn = _mem_conn()

        with transaction(conn):
            execute(conn, ("INSERT INTO t (val) VALUES (?)", ("committed",)))

        assert not conn.in_transaction
        assert execute_one(conn, "SELECT val FROM t") == {"val": "committed"}

    def test_rollback_on_error(self):
        conn = _mem_conn()

        with pytest.raises(RuntimeError):
            with transaction(conn):
                execute(conn, ("INSERT INTO t (val) VALUES (?)", ("rollback",)))
                raise RuntimeError("boom")

        assert execute_one(conn, "SELECT * FROM t") is None

    def test_joins_already_open_transaction(self):
        conn = _mem_conn()
        execute(conn, ("INSERT INTO t (val) VALUES (?)", ("pending",)))
        assert conn.in_transaction

        with transaction(conn):
            execute(conn, ("INSERT INTO t (val) VALUES (?)", ("more",)))

        assert not conn.in_transaction
        assert len(execute(conn, "SELECT * FROM t")) == 2

    def test_rollback_on_connection_subclass(self):
        conn = sqlite3.connect(":memory:", factory=AuditedConnection)
        create_tables(conn, "CREATE TABLE t (id INTEGER PRIMARY KEY, val TEXT);")

        with pytest.raises(RuntimeError):
            with transaction(conn):
                assert conn.in_transaction
                execute(conn, ("INSERT INTO t (val) VALUES (?)", ("gone",)))
                raise RuntimeError("boom")

        assert execute_one(conn, "SELECT * FROM t") is None
