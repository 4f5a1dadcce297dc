"""Tests for pgbuilder.expressions.comparison: operators and standalone rendering."""

import pytest

from pgbuilder import eb, ref, sql
from pgbuilder.errors import StructuralBuildError
from pgbuilder.expressions import Comparison, compare, normalize_operator


class TestOperators:

    @pytest.mark.parametrize("operator,expected", [
        ("=", "="),
        ("like", "LIKE"),
        ("not  in", "NOT IN"),
        ("is not", "IS NOT"),
        ("similar to", "SIMILAR TO"),
        ("Not Ilike", "NOT ILIKE"),
        ("~*", "~*"),
    ])
    def test_normalize(self, operator, expected):
        assert normalize_operator(operator) == expected

    @pytest.mark.parametrize("operator", ["==", "between", "", "; DROP TABLE users"])
    def test_unknown_operator(self, operator):
        with pytest.raises(StructuralBuildError, match="Unsupported operator"):
            compare("id", operator, 1)


class TestRendering:

    def test_simple(self):
        expression = eb("age", ">", 18)
        assert isinstance(expression, Comparison)
        assert expression.sql == "age > $1"
        assert expression.values == (18,)

    def test_operator_rendered_uppercase(self):
        assert eb("name", "ilike", "%jo%").sql == "name ILIKE $1"

    def test_none_renders_null(self):
        assert eb("email", "is", None).sql == "email IS NULL"
        assert eb("email", "is not", None).sql == "email IS NOT NULL"
        assert eb("email", "is", None).values == ()

    def test_in_list(self):
        expression = eb("id", "in", [1, 2, 3])
        assert expression.sql == "id IN ($1, $2, $3)"
        assert expression.values == (1, 2, 3)

    def test_empty_in_list(self):
        expression = eb("id", "not in", [])
        assert expression.sql == "id NOT IN ()"
        assert expression.values == ()

    def test_in_subquery(self):
        expression = eb("id", "in", sql("SELECT user_id FROM posts WHERE score > {}", 10))
        assert expression.sql == "id IN (SELECT user_id FROM posts WHERE score > $1)"
        assert expression.values == (10,)

    def test_column_value_is_inlined(self):
        expression = eb("u.id", "=", ref("p.user_id"))
        assert expression.sql == "u.id = p.user_id"
        assert expression.values == ()

    def test_reserved_identifiers_are_quoted(self):
        assert eb("u.order", "=", 1).sql == 'u."order" = $1'
        assert eb("user.name", "=", "x").sql == '"user".name = $1'

    def test_list_value_bound_whole_for_other_operators(self):
        assert eb("tags", "=", ["a", "b"]).values == (["a", "b"],)


class TestInValues:

    @pytest.mark.parametrize("values", [
        range(3),
        (n for n in range(3)),
        {0: "a", 1: "b", 2: "c"}.keys(),
    ])
    def test_any_iterable_is_expanded(self, values):
        expression = eb("id", "in", values)
        assert expression.sql == "id IN ($1, $2, $3)"
        assert expression.values == (0, 1, 2)

    def test_string_is_a_single_value(self):
        expression = eb("code", "in", "abc")
        assert expression.sql == "code IN ($1)"
        assert expression.values == ("abc",)
