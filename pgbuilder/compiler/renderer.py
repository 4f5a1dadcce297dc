"""Render a whole query into SQL text plus its ordered parameter list."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from .binder import ParameterBinder
from .expressions import compile_expression, compile_operand
from .references import compile_column, compile_table
from ..dialects import Dialect, PostgresDialect


class CompiledQuery(BaseModel):
    """Final SQL statement; ``parameters[i]`` is bound to placeholder ``i + 1``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    sql: str
    parameters: list[Any]


def _render_select(query, binder: ParameterBinder) -> str:
    projection = ", ".join(
        compile_column(column, binder, with_alias=True)
        for column in query.select_expressions
    ) or "*"
    parts = [
        f"SELECT {projection}",
        "FROM " + ", ".join(compile_table(source, binder) for source in query.sources),
    ]
    for join in query.joins:
        parts.append(
            f"{join.join_type} JOIN {compile_table(join.table, binder)}"
            f" ON {compile_column(join.left, binder)} = {compile_column(join.right, binder)}"
        )
    if query.where_expressions:
        parts.append("WHERE " + " AND ".join(
            compile_expression(expression, binder)
            for expression in query.where_expressions
        ))
    if query.order_by_expressions:
        parts.append("ORDER BY " + ", ".join(
            f"{compile_column(order.column, binder)} {order.direction}"
            for order in query.order_by_expressions
        ))
    if query.limit_value is not None:
        parts.append(f"LIMIT {query.limit_value}")
    if query.offset_value is not None:
        parts.append(f"OFFSET {query.offset_value}")
    return " ".join(parts)


def _render_conflict(conflict, binder: ParameterBinder) -> str:
    sql = "ON CONFLICT"
    if conflict.constraint is not None:
        sql += " ON CONSTRAINT " + binder.quote(conflict.constraint)
    elif conflict.columns:
        sql += " (" + ", ".join(binder.quote(column) for column in conflict.columns) + ")"
    if conflict.action.kind == "nothing":
        return sql + " DO NOTHING"
    return sql + " DO UPDATE SET " + ", ".join(
        f"{binder.quote(column)} = {compile_operand(value, binder)}"
        for column, value in conflict.action.assignments
    )


def _render_insert(query, binder: ParameterBinder) -> str:
    parts = ["INSERT INTO " + compile_table(query.target, binder)]
    if query.columns:
        parts.append("(" + ", ".join(binder.quote(column) for column in query.columns) + ")")
        parts.append("VALUES " + ", ".join(
            "(" + ", ".join(compile_operand(value, binder) for value in row) + ")"
            for row in query.rows
        ))
    else:
        parts.append("DEFAULT VALUES")
    if query.conflict is not None:
        parts.append(_render_conflict(query.conflict, binder))
    if query.returning_columns is not None:
        parts.append("RETURNING " + (", ".join(
            compile_column(column, binder, with_alias=True)
            for column in query.returning_columns
        ) or "*"))
    return " ".join(parts)


def render(query, dialect: Dialect | None = None, adapt_values: bool = False) -> CompiledQuery:
    """Compile a SelectQuery or InsertQuery.

    With ``adapt_values``, JSON documents are wrapped for the dialect's driver
    (``psycopg2.extras.Json`` for PostgreSQL); leave it off to inspect the
    plain values.
    """
    binder = ParameterBinder(dialect or PostgresDialect(), adapt_values=adapt_values)
    if query.kind == "select":
        sql = _render_select(query, binder)
    elif query.kind == "insert":
        sql = _render_insert(query, binder)
    else:
        raise TypeError(f"Cannot render query of kind {query.kind!r}")
    return CompiledQuery(sql=sql, parameters=binder.parameters)
