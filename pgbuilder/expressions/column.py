"""Column references: ``id``, ``u.id``, ``u.name as username``, ``*``, ``u.*``."""

import re
from typing import Optional

from ._bases import Node
from ..errors import StructuralBuildError

_COLUMN_PATTERN = re.compile(
    r"^(?:(?P<qualifier>[^\s.]+)\.)?(?P<name>[^\s.]+)"
    r"(?:\s+(?P<keyword>as)\s+(?P<alias>[^\s.]+))?$",
    re.IGNORECASE,
)


class ColumnReference(Node):
    """Reference to a column, optionally qualified by a table name or alias.

    ``alias_keyword`` keeps the caller's spelling of ``as`` so SELECT lists
    render it back exactly as written.
    """

    qualifier: Optional[str] = None
    """Table name or alias (``u`` in ``u.id``); ``None`` for a bare column."""
    name: str
    """Column name, or ``*``."""
    output_alias: Optional[str] = None
    """Alias given in a SELECT/RETURNING list."""
    alias_keyword: str = "as"

    @property
    def path_str(self) -> str:
        """Dot-separated reference without the output alias (e.g. ``u.id``)."""
        if self.qualifier is None:
            return self.name
        return f"{self.qualifier}.{self.name}"

    @property
    def asc(self):
        """Order by this column ascending."""
        from .order import OrderExpression
        return OrderExpression(column=self, desc=False)

    @property
    def desc(self):
        """Order by this column descending (for use in ``order_by(...)``)."""
        from .order import OrderExpression
        return OrderExpression(column=self, desc=True)


def parse_column_reference(column: str | ColumnReference) -> ColumnReference:
    """Parse column text into a ColumnReference; ColumnReference instances pass through.

    Qualifiers are not checked against the tables in scope: an unknown one is
    rendered as written and rejected by the database (or by a schema catalog).
    """
    if isinstance(column, ColumnReference):
        return column
    if not isinstance(column, str):
        raise StructuralBuildError(f"Column reference must be a string; got {type(column)}")
    match = _COLUMN_PATTERN.match(column.strip())
    if match is None:
        raise StructuralBuildError(f"Invalid column reference {column!r}")
    if match["name"] == "*" and match["alias"] is not None:
        raise StructuralBuildError(f"Invalid column reference {column!r}: '*' cannot be aliased")
    return ColumnReference(
        qualifier=match["qualifier"],
        name=match["name"],
        output_alias=match["alias"],
        alias_keyword=match["keyword"] or "as",
    )


def ref(column: str | ColumnReference) -> ColumnReference:
    """Column reference usable as a comparison value (``eb("u.id", "=", ref("p.user_id"))``)."""
    return parse_column_reference(column)
