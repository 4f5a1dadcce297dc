from ._bases import Node, Expression
from .table import TableReference, resolve_table_expression, identifier_for
from .column import ColumnReference, parse_column_reference, ref
from .order import OrderExpression
from .comparison import Comparison, compare, normalize_operator, OPERATORS, LIST_OPERATORS
from .raw import Raw, sql, raw
from .logical import Logical, and_, or_, not_
from .json_path import JsonAccessor, JsonOp, JsonbChain, JsonbExpressionBuilder, jsonb
from .array import ArrayOp, ArrayExpressionBuilder, array
from .builder import ExpressionBuilder, eb
