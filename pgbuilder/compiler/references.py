"""Rendering of table and column references."""

from .binder import ParameterBinder
from ..expressions import ColumnReference, TableReference


def compile_table(table: TableReference, binder: ParameterBinder) -> str:
    sql = binder.quote(table.name)
    if table.alias is not None:
        sql += " AS " + binder.quote(table.alias)
    return sql


def compile_column(column: ColumnReference, binder: ParameterBinder, with_alias: bool = False) -> str:
    """``[qualifier.]name``, plus ``<as> alias`` when ``with_alias`` (SELECT/RETURNING lists)."""
    sql = binder.quote(column.name)
    if column.qualifier is not None:
        sql = binder.quote(column.qualifier) + "." + sql
    if with_alias and column.output_alias is not None:
        sql += f" {column.alias_keyword} {binder.quote(column.output_alias)}"
    return sql
