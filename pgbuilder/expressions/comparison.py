"""Binary comparison nodes: ``column <operator> value``."""

from typing import Any, Iterable, Literal, Mapping

from ._bases import Expression, Node
from .column import ColumnReference, parse_column_reference
from ..errors import StructuralBuildError

OPERATORS = frozenset((
    "=", "!=", "<>", "<", "<=", ">", ">=",
    "LIKE", "NOT LIKE", "ILIKE", "NOT ILIKE",
    "IN", "NOT IN", "IS", "IS NOT",
    "SIMILAR TO", "NOT SIMILAR TO",
    "~", "!~", "~*", "!~*",
))
LIST_OPERATORS = frozenset(("IN", "NOT IN"))


def normalize_operator(operator: str) -> str:
    """Uppercase ``operator`` and collapse inner whitespace (``"not  in"`` -> ``"NOT IN"``)."""
    if not isinstance(operator, str):
        raise StructuralBuildError(f"Operator must be a string; got {type(operator)}")
    normalized = " ".join(operator.split()).upper()
    if normalized not in OPERATORS:
        raise StructuralBuildError(f"Unsupported operator {operator!r}")
    return normalized


class Comparison(Expression):
    """``column operator value``.

    ``value`` is bound as a parameter unless it is ``None`` (rendered ``NULL``),
    a ColumnReference or another Expression (both rendered inline).
    For ``IN``/``NOT IN`` a tuple value renders one placeholder per item.
    """

    kind: Literal["comparison"] = "comparison"
    column: ColumnReference
    operator: str
    value: Any = None


def _is_value_list(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping, Node))


def compare(column: str | ColumnReference, operator: str, value: Any = None) -> Comparison:
    operator = normalize_operator(operator)
    if operator in LIST_OPERATORS and _is_value_list(value):
        value = tuple(value)
    return Comparison(
        column=parse_column_reference(column),
        operator=operator,
        value=value,
    )
