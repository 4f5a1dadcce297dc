"""ORDER BY item."""

from ._bases import Node
from .column import ColumnReference


class OrderExpression(Node):
    """ORDER BY item: one column, ascending or descending."""

    column: ColumnReference
    desc: bool = False

    @property
    def direction(self) -> str:
        return "DESC" if self.desc else "ASC"
