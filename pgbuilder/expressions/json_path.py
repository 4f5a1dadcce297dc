"""JSONB operator nodes and the fluent accessor chain that builds them.

    jsonb("settings").contains({"theme": "dark"})      # settings @> $1
    jsonb("settings").field("ui").field("theme").equals("dark")
    jsonb("specs").path(["dimensions"]).contains({"width": 100})

Keys and paths are always bound as parameters, never inlined.
"""

from typing import Any, Iterable, Literal

from ._bases import Expression, Node
from .column import ColumnReference, parse_column_reference
from ..errors import StructuralBuildError

JsonTerminal = Literal[
    "EQUALS", "NOT_EQUALS", "CONTAINS", "CONTAINED_BY",
    "HAS_KEY", "HAS_ANY_KEY", "HAS_ALL_KEYS", "EXISTS", "IS_NULL",
]


class JsonAccessor(Node):
    """One step of a JSON chain: a single key (``->``) or a key path (``#>``)."""

    kind: Literal["FIELD", "PATH"]
    key: str | tuple[str, ...]


class JsonOp(Expression):
    """A JSONB predicate: ``column [accessors...] terminal value``."""

    kind: Literal["json"] = "json"
    column: ColumnReference
    accessors: tuple[JsonAccessor, ...] = ()
    terminal: JsonTerminal
    value: Any = None
    as_text: bool = False
    """Extract the last accessor as text (``->>``/``#>>``)."""


def _key(key: Any) -> str:
    if not isinstance(key, str):
        raise StructuralBuildError(f"JSON key must be a string; got {type(key)}")
    return key


def _path(path: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(path, str):
        return (path,)
    path = tuple(_key(key) for key in path)
    if not path:
        raise StructuralBuildError("JSON path cannot be empty")
    return path


class JsonbChain(Node):
    """Immutable chain of field/path accessors, closed by a predicate method."""

    column: ColumnReference
    accessors: tuple[JsonAccessor, ...]
    extract_text: bool = False

    def field(self, key: str) -> "JsonbChain":
        accessor = JsonAccessor(kind="FIELD", key=_key(key))
        return self.model_copy(update={"accessors": self.accessors + (accessor,), "extract_text": False})

    def path(self, path: str | Iterable[str]) -> "JsonbChain":
        accessor = JsonAccessor(kind="PATH", key=_path(path))
        return self.model_copy(update={"accessors": self.accessors + (accessor,), "extract_text": False})

    def as_text(self) -> "JsonbChain":
        return self.model_copy(update={"extract_text": True})

    def _terminate(self, terminal: str, value: Any = None) -> JsonOp:
        return JsonOp(
            column=self.column,
            accessors=self.accessors,
            terminal=terminal,
            value=value,
            as_text=self.extract_text,
        )

    def equals(self, value: Any) -> JsonOp:
        return self._terminate("EQUALS", value)

    def not_equals(self, value: Any) -> JsonOp:
        return self._terminate("NOT_EQUALS", value)

    def contains(self, value: Any) -> JsonOp:
        return self._terminate("CONTAINS", value)

    def contained_by(self, value: Any) -> JsonOp:
        return self._terminate("CONTAINED_BY", value)

    def exists(self) -> JsonOp:
        # a single key on the column itself is a key-existence test
        if len(self.accessors) == 1 and self.accessors[0].kind == "FIELD" and not self.extract_text:
            return JsonOp(column=self.column, terminal="HAS_KEY", value=self.accessors[0].key)
        return self._terminate("EXISTS")

    def is_null(self) -> JsonOp:
        return self._terminate("IS_NULL")


class JsonbExpressionBuilder(Node):
    """Start of a JSON chain on a jsonb column; see ``jsonb``."""

    column: ColumnReference

    def contains(self, value: Any) -> JsonOp:
        return JsonOp(column=self.column, terminal="CONTAINS", value=value)

    def contained_by(self, value: Any) -> JsonOp:
        return JsonOp(column=self.column, terminal="CONTAINED_BY", value=value)

    def has_key(self, key: str) -> JsonOp:
        return JsonOp(column=self.column, terminal="HAS_KEY", value=_key(key))

    def has_any_key(self, keys: Iterable[str]) -> JsonOp:
        return JsonOp(column=self.column, terminal="HAS_ANY_KEY", value=_path(keys))

    def has_all_keys(self, keys: Iterable[str]) -> JsonOp:
        return JsonOp(column=self.column, terminal="HAS_ALL_KEYS", value=_path(keys))

    def field(self, key: str) -> JsonbChain:
        return JsonbChain(column=self.column, accessors=()).field(key)

    def path(self, path: str | Iterable[str]) -> JsonbChain:
        return JsonbChain(column=self.column, accessors=()).path(path)


def jsonb(column: str | ColumnReference) -> JsonbExpressionBuilder:
    return JsonbExpressionBuilder(column=parse_column_reference(column))
