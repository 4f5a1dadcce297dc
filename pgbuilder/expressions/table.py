"""Table references for FROM/JOIN/INTO clauses, and the ``"name as alias"`` resolver."""

import re
from typing import Optional

from ._bases import Node
from ..errors import StructuralBuildError

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
"""Valid unquoted table name or alias."""

ALIAS_RESERVED_WORDS = frozenset((
    "select", "from", "where", "and", "or", "not", "in", "as", "on", "join",
    "left", "right", "inner", "outer", "group", "order", "by", "having",
    "limit", "offset", "union", "intersect", "except", "case", "when", "then",
    "else", "end", "null", "true", "false", "distinct", "exists", "between",
    "like", "ilike", "similar", "is", "all", "any", "some", "asc", "desc",
))
"""Keywords that cannot be used as a table alias."""


class TableReference(Node):
    """A table named in a query, optionally aliased (``users as u``)."""

    name: str
    alias: Optional[str] = None

    @property
    def identifier(self) -> str:
        """Token that qualifies this table's columns: the alias if any, else the name."""
        return identifier_for(self)


def identifier_for(reference: TableReference) -> str:
    """Return the alias of ``reference`` if present, else its table name."""
    return reference.alias if reference.alias is not None else reference.name


def _fail(expression: str, reason: str) -> StructuralBuildError:
    return StructuralBuildError(f"Invalid table expression {expression!r}: {reason}")


def resolve_table_expression(expression: str | TableReference) -> TableReference:
    """Parse ``"users"`` or ``"users as u"`` (``as`` in any case) into a TableReference.

    Table existence is not checked here; see ``pgbuilder.schema``.

    Raises:
        StructuralBuildError: empty text, missing alias after ``as``, invalid
            identifiers, or an alias that is a reserved word.
    """
    if isinstance(expression, TableReference):
        return expression
    if not isinstance(expression, str):
        raise StructuralBuildError(f"Table expression must be a string; got {type(expression)}")
    tokens = expression.split()
    if not tokens:
        raise _fail(expression, "table expression cannot be empty")
    if len(tokens) == 1:
        name, alias = tokens[0], None
    elif tokens[1].lower() != "as":
        raise _fail(expression, "expected 'table' or 'table as alias'")
    elif len(tokens) == 2:
        raise _fail(expression, "missing alias after 'as'")
    elif len(tokens) == 3:
        name, alias = tokens[0], tokens[2]
    else:
        raise _fail(expression, "expected a single alias after 'as'")
    if not IDENTIFIER_PATTERN.match(name):
        raise _fail(expression, f"invalid table name {name!r}")
    if alias is not None:
        if not IDENTIFIER_PATTERN.match(alias):
            raise _fail(expression, f"invalid alias {alias!r}")
        if alias.lower() in ALIAS_RESERVED_WORDS:
            raise _fail(expression, f"alias {alias!r} is a reserved SQL keyword")
    return TableReference(name=name, alias=alias)
