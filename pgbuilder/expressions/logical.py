"""AND / OR / NOT groups."""

from typing import Iterable, Literal

from ._bases import Expression
from .raw import raw


class Logical(Expression):
    kind: Literal["logical"] = "logical"
    operator: Literal["AND", "OR", "NOT"]
    children: tuple[Expression, ...]


def _group(operator: str, expressions: Iterable[Expression]) -> Expression:
    expressions = tuple(expressions)
    for expression in expressions:
        if not isinstance(expression, Expression):
            raise TypeError(f"Cannot combine {type(expression)} with {operator}; expected an expression")
    if not expressions:
        return raw("true" if operator == "AND" else "false")
    if len(expressions) == 1:
        return expressions[0]
    return Logical(operator=operator, children=expressions)


def and_(expressions: Iterable[Expression]) -> Expression:
    """Conjunction. An empty list is ``true``; a single expression is returned as is."""
    return _group("AND", expressions)


def or_(expressions: Iterable[Expression]) -> Expression:
    """Disjunction. An empty list is ``false``; a single expression is returned as is."""
    return _group("OR", expressions)


def not_(expression: Expression) -> Logical:
    if not isinstance(expression, Expression):
        raise TypeError(f"Cannot negate {type(expression)}; expected an expression")
    return Logical(operator="NOT", children=(expression,))
