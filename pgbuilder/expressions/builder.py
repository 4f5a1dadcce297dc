"""The callable handed to ``where(lambda eb: ...)``."""

from typing import Any

from .array import array
from .column import ColumnReference, ref
from .comparison import Comparison, compare
from .json_path import jsonb
from .logical import and_, not_, or_
from .raw import raw, sql


class ExpressionBuilder:
    """``eb(column, operator, value)`` builds a comparison; the attributes build the rest.

        query.where(lambda eb: eb.or_([
            eb("u.active", "=", True),
            eb.jsonb("u.settings").has_key("beta"),
        ]))

    A callback may also return a list, which is combined with AND.
    """

    and_ = staticmethod(and_)
    or_ = staticmethod(or_)
    not_ = staticmethod(not_)
    jsonb = staticmethod(jsonb)
    array = staticmethod(array)
    ref = staticmethod(ref)
    sql = staticmethod(sql)
    raw = staticmethod(raw)

    def __call__(self, column: str | ColumnReference, operator: str, value: Any = None) -> Comparison:
        return compare(column, operator, value)


eb = ExpressionBuilder()
