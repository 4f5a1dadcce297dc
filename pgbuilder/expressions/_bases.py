"""Base node types for query expression trees."""

from __future__ import annotations
from typing import Any

from pydantic import BaseModel, ConfigDict


class Node(BaseModel):
    """Base type for every query node.

    Nodes are frozen: builder calls never mutate a node, they build a new one
    that points at the unchanged children.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Expression(Node):
    """Base type for boolean expression nodes (the WHERE tree).

    Each concrete expression declares a literal ``kind`` tag (``comparison``,
    ``logical``, ``json``, ``array``, ``raw``) which the compiler dispatches on.
    ``sql`` and ``values`` compile the expression on its own, so placeholders
    are numbered from ``$1``; inside a query they are renumbered at render time.
    """

    @property
    def sql(self) -> str:
        """SQL fragment for this expression, placeholders numbered from ``$1``."""
        from ..compiler import compile_standalone
        return compile_standalone(self)[0]

    @property
    def values(self) -> tuple[Any, ...]:
        """Bound values for the placeholders in ``sql``, in order."""
        from ..compiler import compile_standalone
        return compile_standalone(self)[1]

    def __and__(self, other: Expression):
        from .logical import Logical, and_
        if isinstance(self, Logical) and self.operator == "AND":
            return and_(self.children + (other,))
        return and_([self, other])

    def __or__(self, other: Expression):
        from .logical import Logical, or_
        if isinstance(self, Logical) and self.operator == "OR":
            return or_(self.children + (other,))
        return or_([self, other])

    def __invert__(self):
        from .logical import not_
        return not_(self)
