"""Tests for pgbuilder.schema: catalog validation at compile time."""

import pytest
from pydantic import BaseModel

from pgbuilder import Database, Schema, do_update, excluded, jsonb
from pgbuilder.errors import SchemaValidationError


@pytest.fixture
def db():
    schema = Schema(tables={
        "users": {"id", "name", "email", "settings"},
        "posts": {"id", "user_id", "title"},
    })
    return Database(catalog=schema)


class TestSelect:

    def test_valid_query(self, db):
        compiled = (db.select_from("users as u")
                    .inner_join("posts as p", "u.id", "p.user_id")
                    .select(["u.name", "p.title"])
                    .where(jsonb("u.settings").has_key("beta"))
                    .order_by("title")
                    .compile())
        assert compiled.sql.startswith("SELECT u.name, p.title FROM users AS u")

    def test_unknown_table(self, db):
        with pytest.raises(SchemaValidationError, match="Unknown table `comments`"):
            db.select_from("comments").compile()

    def test_aliased_table_name_not_usable(self, db):
        with pytest.raises(SchemaValidationError, match="aliased as `u`"):
            db.select_from("users as u").where("users.id", "=", 1).compile()

    def test_unknown_qualifier(self, db):
        with pytest.raises(SchemaValidationError, match="Unknown table or alias `x`"):
            db.select_from("users as u").select(["x.name"]).compile()

    def test_unknown_column(self, db):
        with pytest.raises(SchemaValidationError, match="Unknown column `age` in table `users`"):
            db.select_from("users as u").where("u.age", ">", 3).compile()

    def test_unknown_unqualified_column(self, db):
        with pytest.raises(SchemaValidationError, match="Unknown column `age`"):
            db.select_from("users").order_by("age").compile()

    def test_nested_expressions_are_checked(self, db):
        query = db.select_from("users").where(lambda eb: eb.or_([
            eb("name", "=", "a"),
            eb.not_(eb("nope", "is", None)),
        ]))
        with pytest.raises(SchemaValidationError, match="nope"):
            query.compile()

    def test_star_is_always_valid(self, db):
        assert db.select_from("users as u").select(["u.*"]).compile().sql == "SELECT u.* FROM users AS u"

    def test_building_does_not_validate(self, db):
        query = db.select_from("comments")
        with pytest.raises(SchemaValidationError):
            query.sql


class TestInsert:

    def test_valid(self, db):
        compiled = (db.insert_into("users")
                    .values({"name": "a", "email": "b"})
                    .on_conflict(["email"], do_update(name=excluded("name")))
                    .returning(["id"])
                    .compile())
        assert compiled.parameters == ["a", "b"]

    def test_unknown_value_column(self, db):
        with pytest.raises(SchemaValidationError, match="Unknown column `age`"):
            db.insert_into("users").values({"age": 3}).compile()

    def test_unknown_excluded_column(self, db):
        query = db.insert_into("users").values({"email": "b"}).on_conflict(
            ["email"], do_update(name=excluded("nickname")),
        )
        with pytest.raises(SchemaValidationError, match="nickname"):
            query.compile()

    def test_unknown_returning_column(self, db):
        with pytest.raises(SchemaValidationError):
            db.insert_into("users").values({"name": "a"}).returning(["created_at"]).compile()


def test_from_models():
    class User(BaseModel):
        id: int
        name: str

    schema = Schema.from_models(users=User)
    assert schema.tables == {"users": frozenset({"id", "name"})}


def test_without_catalog_nothing_is_checked():
    assert Database().select_from("anything as a").where("b.c", "=", 1).sql == (
        "SELECT * FROM anything AS a WHERE b.c = $1"
    )
