"""Tests for Query.execute against a SQLite database."""

import logging

import pytest

from pgbuilder import Database, excluded, do_update, select_from, insert_into
from pgbuilder.connection import _get_connection


@pytest.fixture
def users(setup_db):
    connection = _get_connection()
    connection.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, email TEXT UNIQUE, active BOOLEAN)"
    )
    connection.close()


def test_insert_and_select(users):
    inserted = insert_into("users").values([
        {"name": "Ann", "email": "ann@example.com", "active": True},
        {"name": "Bob", "email": "bob@example.com", "active": False},
    ]).returning(["id", "name"]).execute()
    assert sorted(inserted, key=lambda row: row["id"]) == [{"id": 1, "name": "Ann"}, {"id": 2, "name": "Bob"}]

    rows = (select_from("users as u")
            .select(["u.name", "u.email as mail"])
            .where("u.active", "=", True)
            .execute())
    assert rows == [{"name": "Ann", "mail": "ann@example.com"}]


def test_execute_rows_as_tuples(users):
    insert_into("users").values({"name": "Ann", "email": "a"}).execute()
    assert select_from("users").select(["name"]).execute(rows_as_dicts=False) == [("Ann",)]


def test_pagination_and_in(users):
    insert_into("users").values([{"name": n, "email": n} for n in "abcde"]).execute()
    rows = (select_from("users")
            .select(["name"])
            .where("name", "in", ["a", "c", "d", "e"])
            .order_by("name", "desc")
            .limit(2)
            .offset(1)
            .execute())
    assert rows == [{"name": "d"}, {"name": "c"}]


def test_upsert(users):
    insert_into("users").values({"name": "Ann", "email": "ann@example.com"}).execute()
    (insert_into("users")
     .values({"name": "Annie", "email": "ann@example.com"})
     .on_conflict(["email"], do_update(name=excluded("name")))
     .execute())
    assert select_from("users").select(["name"]).execute() == [{"name": "Annie"}]


def test_named_connection(setup_db, tmp_path):
    from pgbuilder import connect
    connect(f"sqlite:///{tmp_path / 'other.sqlite3'}", name="other")
    db = Database(connection_name="other")
    _get_connection("other").execute("CREATE TABLE t (x INTEGER)")
    db.insert_into("t").values({"x": 7}).execute()
    assert db.select_from("t").execute() == [{"x": 7}]


def test_execute_logs_statement(users, caplog):
    with caplog.at_level(logging.DEBUG, logger="pgbuilder"):
        select_from("users").where("id", "=", 1).execute()
    assert "SELECT * FROM users WHERE id = ?1" in caplog.text
