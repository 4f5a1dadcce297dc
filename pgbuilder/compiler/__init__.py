from .binder import ParameterBinder
from .expressions import compile_expression, compile_operand, compile_standalone
from .json_path import compile_json_path
from .references import compile_column, compile_table
from .renderer import CompiledQuery, render
