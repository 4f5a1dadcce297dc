"""Rendering of the WHERE expression tree."""

from typing import Any

from .binder import ParameterBinder
from .json_path import compile_json_path
from .references import compile_column
from ..dialects import Dialect, PostgresDialect
from ..expressions import (
    ArrayOp,
    ColumnReference,
    Comparison,
    Expression,
    JsonOp,
    LIST_OPERATORS,
    Logical,
    Raw,
)


def compile_operand(value: Any, binder: ParameterBinder) -> str:
    """Right-hand side of a comparison, a raw fragment or an insert/update value."""
    if value is None:
        return "NULL"
    if isinstance(value, ColumnReference):
        return compile_column(value, binder)
    if isinstance(value, Expression):
        return compile_expression(value, binder)
    return binder.bind(value)


def _compile_comparison(expression: Comparison, binder: ParameterBinder) -> str:
    column = compile_column(expression.column, binder)
    operator = expression.operator
    value = expression.value
    if operator in LIST_OPERATORS and value is not None:
        if isinstance(value, tuple):
            items = ", ".join(compile_operand(item, binder) for item in value)
        else:
            items = compile_operand(value, binder)
        return f"{column} {operator} ({items})"
    return f"{column} {operator} {compile_operand(value, binder)}"


def _compile_logical(expression: Logical, binder: ParameterBinder, grouped: bool) -> str:
    if expression.operator == "NOT":
        return f"NOT ({compile_expression(expression.children[0], binder, grouped=False)})"
    sql = f" {expression.operator} ".join(
        compile_expression(child, binder) for child in expression.children
    )
    if grouped and len(expression.children) > 1:
        sql = f"({sql})"
    return sql


def _compile_array(expression: ArrayOp, binder: ParameterBinder) -> str:
    column = compile_column(expression.column, binder)
    if expression.operator in ("ANY", "ALL"):
        return f"{binder.bind(expression.value)} = {expression.operator}({column})"
    items = ", ".join(binder.bind(item) for item in expression.value)
    cast = "" if expression.value else "::text[]"
    return f"{column} {expression.operator} ARRAY[{items}]{cast}"


def _compile_raw(expression: Raw, binder: ParameterBinder) -> str:
    parts = [expression.segments[0]]
    for value, segment in zip(expression.parameters, expression.segments[1:]):
        parts.append(compile_operand(value, binder))
        parts.append(segment)
    return "".join(parts)


def compile_expression(expression: Expression, binder: ParameterBinder, grouped: bool = True) -> str:
    """Render ``expression``, binding its values through ``binder``.

    AND/OR groups of two or more children are parenthesized, except directly
    under NOT (``grouped=False``), which supplies its own parentheses.
    """
    if isinstance(expression, Comparison):
        return _compile_comparison(expression, binder)
    if isinstance(expression, Logical):
        return _compile_logical(expression, binder, grouped)
    if isinstance(expression, JsonOp):
        return compile_json_path(expression, binder)
    if isinstance(expression, ArrayOp):
        return _compile_array(expression, binder)
    if isinstance(expression, Raw):
        return _compile_raw(expression, binder)
    raise TypeError(f"Cannot compile {type(expression)} as an expression")


def compile_standalone(expression: Expression, dialect: Dialect | None = None) -> tuple[str, tuple[Any, ...]]:
    """Compile ``expression`` on its own, numbering placeholders from 1."""
    binder = ParameterBinder(dialect or PostgresDialect())
    return compile_expression(expression, binder), tuple(binder.parameters)
