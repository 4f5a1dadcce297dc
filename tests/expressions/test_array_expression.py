"""Tests for pgbuilder.expressions.array: array containment and ANY/ALL."""

from pgbuilder import array


def test_contains():
    expression = array("tags").contains(["a", "b"])
    assert expression.sql == "tags @> ARRAY[$1, $2]"
    assert expression.values == ("a", "b")


def test_is_contained_by():
    assert array("tags").is_contained_by(["a"]).sql == "tags <@ ARRAY[$1]"


def test_overlaps():
    assert array("tags").overlaps(["x"]).sql == "tags && ARRAY[$1]"


def test_empty_array_is_cast():
    expression = array("tags").overlaps([])
    assert expression.sql == "tags && ARRAY[]::text[]"
    assert expression.values == ()


def test_has_any():
    expression = array("scores").has_any(100)
    assert expression.sql == "$1 = ANY(scores)"
    assert expression.values == (100,)


def test_has_all():
    assert array("scores").has_all(100).sql == "$1 = ALL(scores)"
