"""Optional catalog of known tables and columns, checked before rendering.

    schema = Schema(tables={"users": {"id", "name", "email"}})
    db = Database(catalog=schema)
    db.select_from("users as u").where("users.id", "=", 1).compile()
    # SchemaValidationError: table `users` is aliased as `u`...

Without a catalog, unknown tables and columns are left for the database to reject.
"""

from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict

from .errors import SchemaValidationError
from .expressions import (
    ArrayOp,
    ColumnReference,
    Comparison,
    Expression,
    JsonOp,
    Logical,
    Raw,
    TableReference,
)


def _expression_columns(expression: Expression) -> Iterator[ColumnReference]:
    if isinstance(expression, Comparison):
        yield expression.column
        yield from _operand_columns(expression.value)
    elif isinstance(expression, Logical):
        for child in expression.children:
            yield from _expression_columns(child)
    elif isinstance(expression, (JsonOp, ArrayOp)):
        yield expression.column
    elif isinstance(expression, Raw):
        for value in expression.parameters:
            yield from _operand_columns(value)


def _operand_columns(value) -> Iterator[ColumnReference]:
    if isinstance(value, ColumnReference):
        yield value
    elif isinstance(value, Expression):
        yield from _expression_columns(value)
    elif isinstance(value, tuple):
        for item in value:
            yield from _operand_columns(item)


class _Scope:
    """Tables visible to one statement, keyed by the identifier that qualifies them."""

    def __init__(self, schema: "Schema", tables: Iterable[TableReference]):
        self.schema = schema
        self.tables: dict[str, str] = {}
        aliased = {}
        for table in tables:
            if table.name not in schema.tables:
                raise SchemaValidationError(f"Unknown table `{table.name}`")
            self.tables[table.identifier] = table.name
            if table.alias is not None:
                aliased[table.name] = table.alias
        # an aliased table is only reachable through its alias
        self.hidden = {name: alias for name, alias in aliased.items() if name not in self.tables}

    def check(self, column: ColumnReference) -> None:
        if column.qualifier is not None:
            if column.qualifier in self.hidden:
                raise SchemaValidationError(
                    f"Table `{column.qualifier}` is aliased as `{self.hidden[column.qualifier]}`; "
                    f"use `{self.hidden[column.qualifier]}.{column.name}`"
                )
            if column.qualifier not in self.tables:
                raise SchemaValidationError(f"Unknown table or alias `{column.qualifier}` in `{column.path_str}`")
            table = self.tables[column.qualifier]
            if column.name != "*" and column.name not in self.schema.tables[table]:
                raise SchemaValidationError(f"Unknown column `{column.name}` in table `{table}`")
        elif column.name != "*":
            if not any(column.name in self.schema.tables[table] for table in self.tables.values()):
                raise SchemaValidationError(f"Unknown column `{column.name}`")


class Schema(BaseModel):
    """Known tables mapped to their column names."""

    model_config = ConfigDict(frozen=True)

    tables: dict[str, frozenset[str]]

    @classmethod
    def from_models(cls, **models: type[BaseModel]) -> "Schema":
        """Build a catalog from pydantic models: ``Schema.from_models(users=User)``."""
        return cls(tables={name: frozenset(model.model_fields) for name, model in models.items()})

    def check(self, query) -> None:
        """Raise SchemaValidationError if ``query`` references anything unknown."""
        if query.kind == "select":
            self._check_select(query)
        elif query.kind == "insert":
            self._check_insert(query)

    def _check_select(self, query) -> None:
        scope = _Scope(self, list(query.sources) + [join.table for join in query.joins])
        columns = list(query.select_expressions)
        for join in query.joins:
            columns += [join.left, join.right]
        for expression in query.where_expressions:
            columns += _expression_columns(expression)
        columns += [order.column for order in query.order_by_expressions]
        for column in columns:
            scope.check(column)

    def _check_insert(self, query) -> None:
        scope = _Scope(self, [query.target])
        known = self.tables[query.target.name]
        names = list(query.columns)
        if query.conflict is not None:
            names += query.conflict.columns
            if query.conflict.action.kind == "update":
                for column, value in query.conflict.action.assignments:
                    names.append(column)
                    for reference in _operand_columns(value):
                        if reference.qualifier == "EXCLUDED":
                            names.append(reference.name)
                        else:
                            scope.check(reference)
        for name in names:
            if name not in known:
                raise SchemaValidationError(f"Unknown column `{name}` in table `{query.target.name}`")
        for column in query.returning_columns or ():
            scope.check(column)
