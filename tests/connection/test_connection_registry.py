"""Tests for pgbuilder.connection: connect(), _get_connection(), and Connection.execute."""

import os
import sqlite3

import pytest

from pgbuilder.connection import Connection, _get_connection, connect
from pgbuilder.dialects import SqliteDialect


def _setup(name: str) -> str:
    os.makedirs("/tmp/pgbuilder-tests", exist_ok=True)
    path = f"/tmp/pgbuilder-tests/test-{name}.sqlite3"
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    connect(f"sqlite:///{path}", name=name)
    return path


def test_connect_rejects_non_string_non_callable():
    with pytest.raises(ValueError, match="database_url must be a str or a callable"):
        connect(123, name="bad")
    with pytest.raises(ValueError, match="database_url must be a str or a callable"):
        connect([], name="bad")


def test_unknown_name():
    with pytest.raises(ValueError, match="No connection configured with name=`nonexistent`"):
        _get_connection(name="nonexistent")


def test_get_connection_with_callable_url():
    os.makedirs("/tmp/pgbuilder-tests", exist_ok=True)
    path = "/tmp/pgbuilder-tests/test-callable.sqlite3"
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    connect(lambda: f"sqlite:///{path}", name="callable_db")
    connection = _get_connection(name="callable_db")
    assert isinstance(connection, Connection)
    assert isinstance(connection.dialect, SqliteDialect)
    connection.close()
    assert os.path.exists(path)


def test_execute_commits_and_returns_rows():
    _setup("execute")
    c0 = _get_connection(name="execute")
    assert c0.execute("CREATE TABLE foo(bar TEXT)") == []
    assert c0.execute("INSERT INTO foo(bar) VALUES (?1), (?2)", ["a", "b"]) == []
    c0.close()
    c1 = _get_connection(name="execute")
    assert c1.execute("SELECT bar FROM foo ORDER BY bar") == [("a",), ("b",)]
    assert c1.execute("SELECT bar FROM foo WHERE bar = ?1", ["b"], rows_as_dicts=True) == [{"bar": "b"}]
    c1.close()


def test_execute_rolls_back_and_propagates_driver_errors():
    _setup("rollback")
    connection = _get_connection(name="rollback")
    connection.execute("CREATE TABLE foo(bar TEXT UNIQUE)")
    connection.execute("INSERT INTO foo(bar) VALUES (?1)", ["a"])
    with pytest.raises(sqlite3.IntegrityError):
        connection.execute("INSERT INTO foo(bar) VALUES (?1)", ["a"])
    assert connection.execute("SELECT COUNT(*) FROM foo") == [(1,)]
    connection.close()
