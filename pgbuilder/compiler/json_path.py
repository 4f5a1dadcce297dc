"""Rendering of JSONB predicates."""

from typing import Any

from .binder import ParameterBinder
from .references import compile_column
from ..expressions import JsonAccessor, JsonOp

OBJECT_OPERATORS = {"FIELD": "->", "PATH": "#>"}
TEXT_OPERATORS = {"FIELD": "->>", "PATH": "#>>"}
KEY_OPERATORS = {"HAS_KEY": "?", "HAS_ANY_KEY": "?|", "HAS_ALL_KEYS": "?&"}
CONTAINMENT_OPERATORS = {"CONTAINS": "@>", "CONTAINED_BY": "<@"}
EQUALITY_OPERATORS = {"EQUALS": "=", "NOT_EQUALS": "!="}


def _is_document(value: Any) -> bool:
    return isinstance(value, (dict, list, tuple))


def _compile_accessors(
    column_sql: str,
    accessors: tuple[JsonAccessor, ...],
    binder: ParameterBinder,
    text_last: bool,
) -> str:
    parts = [column_sql]
    for index, accessor in enumerate(accessors):
        last = index == len(accessors) - 1
        operators = TEXT_OPERATORS if last and text_last else OBJECT_OPERATORS
        key = list(accessor.key) if accessor.kind == "PATH" else accessor.key
        parts.append(f"{operators[accessor.kind]} {binder.bind(key)}")
    return " ".join(parts)


def compile_json_path(expression: JsonOp, binder: ParameterBinder) -> str:
    """Render ``column [-> key | #> path]... <terminal>``.

    Equality against a scalar extracts the last step as text (``->>``/``#>>``);
    against a dict or list it compares jsonb values (``->``/``#>``) and the
    value is bound as a document.
    """
    column = compile_column(expression.column, binder)
    terminal = expression.terminal
    value = expression.value

    if terminal in KEY_OPERATORS:
        if isinstance(value, tuple):
            value = list(value)
        return f"{column} {KEY_OPERATORS[terminal]} {binder.bind(value)}"

    if terminal in EQUALITY_OPERATORS:
        document = _is_document(value) and not expression.as_text
        chain = _compile_accessors(column, expression.accessors, binder, text_last=not document)
        placeholder = binder.bind_json(value) if document else binder.bind(value)
        return f"{chain} {EQUALITY_OPERATORS[terminal]} {placeholder}"

    chain = _compile_accessors(column, expression.accessors, binder, text_last=expression.as_text)
    if terminal in CONTAINMENT_OPERATORS:
        return f"{chain} {CONTAINMENT_OPERATORS[terminal]} {binder.bind_json(value)}"
    if terminal == "EXISTS":
        return f"{chain} IS NOT NULL"
    if terminal == "IS_NULL":
        return f"{chain} IS NULL"
    raise ValueError(f"Unsupported JSON terminal: {terminal}")
