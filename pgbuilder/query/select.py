"""SELECT queries."""

from typing import Any, Callable, Iterable, Literal, Optional

from ._bases import Query, check_pagination
from ..errors import StructuralBuildError
from ..expressions import (
    ColumnReference,
    Expression,
    ExpressionBuilder,
    Node,
    OrderExpression,
    TableReference,
    and_,
    compare,
    parse_column_reference,
    resolve_table_expression,
)


class JoinClause(Node):
    """``<join_type> JOIN table ON left = right``."""

    join_type: Literal["INNER", "LEFT", "RIGHT", "FULL"]
    table: TableReference
    left: ColumnReference
    right: ColumnReference


def _direction(direction: Optional[str]) -> bool:
    """Return True for descending."""
    if direction is None:
        return False
    if not isinstance(direction, str) or direction.lower() not in ("asc", "desc"):
        raise StructuralBuildError(f"Invalid sort direction {direction!r}; expected 'asc' or 'desc'")
    return direction.lower() == "desc"


def _order_expression(item: Any, direction: Optional[str] = None) -> OrderExpression:
    if isinstance(item, OrderExpression):
        return item
    if isinstance(item, dict):
        return _order_expression(item.get("column"), item.get("direction"))
    if isinstance(item, tuple):
        return _order_expression(*item)
    return OrderExpression(column=parse_column_reference(item), desc=_direction(direction))


class SelectQuery(Query):
    """``SELECT ... FROM ...`` with joins, filters, ordering and pagination.

        query = (db.select_from("users as u")
                 .inner_join("posts as p", "u.id", "p.user_id")
                 .select(["u.name", "p.title"])
                 .where("u.active", "=", True)
                 .order_by("p.created_at", "desc")
                 .limit(10))
        query.compile().sql
    """

    kind: Literal["select"] = "select"
    sources: tuple[TableReference, ...]
    joins: tuple[JoinClause, ...] = ()
    select_expressions: tuple[ColumnReference, ...] = ()
    """Projection; empty means ``*``."""
    where_expressions: tuple[Expression, ...] = ()
    """Combined with AND."""
    order_by_expressions: tuple[OrderExpression, ...] = ()
    limit_value: Optional[int] = None
    offset_value: Optional[int] = None

    @property
    def filter(self) -> Optional[Expression]:
        """The WHERE clause as a single expression, or None."""
        if not self.where_expressions:
            return None
        return and_(self.where_expressions)

    def select(self, columns: str | ColumnReference | Iterable[str | ColumnReference]) -> "SelectQuery":
        """Replace the projection (``"u.name as author"`` keeps its alias)."""
        if isinstance(columns, (str, ColumnReference)):
            columns = [columns]
        return self.clone_query_with(
            select_expressions=tuple(parse_column_reference(column) for column in columns)
        )

    def select_all(self) -> "SelectQuery":
        return self.clone_query_with(select_expressions=())

    def _join(self, join_type: str, table: str, left: str, right: str) -> "SelectQuery":
        table = resolve_table_expression(table)
        left = parse_column_reference(left)
        right = parse_column_reference(right)
        # unqualified join columns belong to the primary table and the joined table
        if left.qualifier is None:
            left = left.model_copy(update={"qualifier": self.sources[0].identifier})
        if right.qualifier is None:
            right = right.model_copy(update={"qualifier": table.identifier})
        join = JoinClause(join_type=join_type, table=table, left=left, right=right)
        return self.clone_query_with(joins=self.joins + (join,))

    def inner_join(self, table: str, left: str, right: str) -> "SelectQuery":
        return self._join("INNER", table, left, right)

    def left_join(self, table: str, left: str, right: str) -> "SelectQuery":
        return self._join("LEFT", table, left, right)

    def right_join(self, table: str, left: str, right: str) -> "SelectQuery":
        return self._join("RIGHT", table, left, right)

    def full_join(self, table: str, left: str, right: str) -> "SelectQuery":
        return self._join("FULL", table, left, right)

    def where(
        self,
        condition: str | ColumnReference | Expression | Callable[[ExpressionBuilder], Any],
        operator: Optional[str] = None,
        value: Any = None,
    ) -> "SelectQuery":
        """Add a filter, ANDed with any previous ones.

        Accepts ``where("age", ">", 18)``, an expression, or a callback
        receiving an ExpressionBuilder and returning an expression or a list
        of expressions (implicit AND).
        """
        if isinstance(condition, Expression):
            expression = condition
        elif isinstance(condition, (str, ColumnReference)):
            if operator is None:
                raise StructuralBuildError(f"where({condition!r}) requires an operator")
            expression = compare(condition, operator, value)
        elif callable(condition):
            expression = condition(ExpressionBuilder())
            if isinstance(expression, (list, tuple)):
                expression = and_(expression)
            if not isinstance(expression, Expression):
                raise TypeError(f"where() callback must return an expression; got {type(expression)}")
        else:
            raise TypeError(f"Cannot filter on {type(condition)}")
        return self.clone_query_with(where_expressions=self.where_expressions + (expression,))

    def order_by(self, column: Any, direction: Optional[str] = None) -> "SelectQuery":
        """Append ordering: ``order_by("id")``, ``order_by("id", "desc")``,
        ``order_by([("name", "asc"), {"column": "id", "direction": "desc"}])``.
        """
        if isinstance(column, list):
            if direction is not None:
                raise StructuralBuildError("order_by() takes no direction with a list of columns")
            orders = tuple(_order_expression(item) for item in column)
        else:
            orders = (_order_expression(column, direction),)
        return self.clone_query_with(order_by_expressions=self.order_by_expressions + orders)

    def limit(self, limit: int) -> "SelectQuery":
        return self.clone_query_with(limit_value=check_pagination(limit, "limit"))

    def offset(self, offset: int) -> "SelectQuery":
        return self.clone_query_with(offset_value=check_pagination(offset, "offset"))
