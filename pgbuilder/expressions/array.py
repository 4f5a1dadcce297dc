"""Postgres array predicates."""

from typing import Any, Iterable, Literal

from ._bases import Expression, Node
from .column import ColumnReference, parse_column_reference


class ArrayOp(Expression):
    """``column @> ARRAY[...]``, ``<@``, ``&&``, or ``value = ANY(column)`` / ``ALL``."""

    kind: Literal["array"] = "array"
    column: ColumnReference
    operator: Literal["@>", "<@", "&&", "ANY", "ALL"]
    value: Any


class ArrayExpressionBuilder(Node):
    column: ColumnReference

    def contains(self, values: Iterable[Any]) -> ArrayOp:
        return ArrayOp(column=self.column, operator="@>", value=tuple(values))

    def is_contained_by(self, values: Iterable[Any]) -> ArrayOp:
        return ArrayOp(column=self.column, operator="<@", value=tuple(values))

    def overlaps(self, values: Iterable[Any]) -> ArrayOp:
        return ArrayOp(column=self.column, operator="&&", value=tuple(values))

    def has_any(self, value: Any) -> ArrayOp:
        return ArrayOp(column=self.column, operator="ANY", value=value)

    def has_all(self, value: Any) -> ArrayOp:
        return ArrayOp(column=self.column, operator="ALL", value=value)


def array(column: str | ColumnReference) -> ArrayExpressionBuilder:
    return ArrayExpressionBuilder(column=parse_column_reference(column))
