"""Base Dialect type: placeholder style, identifier quoting and driver connection per engine."""

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Sequence

from pydantic import BaseModel

RESERVED_WORDS = frozenset((
    "select", "from", "where", "join", "inner", "left", "right", "outer", "on",
    "as", "and", "or", "not", "in", "exists", "between", "like", "is", "null",
    "true", "false", "case", "when", "then", "else", "end", "group", "by",
    "having", "order", "limit", "offset", "distinct", "union", "all", "except",
    "intersect", "with", "recursive", "insert", "into", "values", "update",
    "set", "delete", "create", "table", "alter", "drop", "index", "view",
    "trigger", "function", "procedure", "schema", "database", "user", "role",
    "grant", "revoke",
))
"""Identifiers matching one of these (case-insensitively) are double-quoted."""

_NEEDS_QUOTES = re.compile(r"[^a-zA-Z0-9_]|^[0-9]")


class Dialect(BaseModel, ABC):
    """Base for database dialects.

    The compiler asks the dialect for placeholders and quoted identifiers;
    ``Connection.execute`` asks it to ``prepare`` the compiled statement for
    its DB-API driver.
    """

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ()
    """URL schemes this dialect handles (e.g. ('sqlite',), ('postgresql', 'postgres'))."""

    @abstractmethod
    def placeholder(self, index: int) -> str:
        """Placeholder text for the 1-based parameter ``index``."""
        ...  # pylint: disable=unnecessary-ellipsis

    def quote_identifier(self, identifier: str) -> str:
        """Double-quote ``identifier`` if it needs it; ``*`` is never quoted."""
        if identifier == "*":
            return identifier
        if _NEEDS_QUOTES.search(identifier) or identifier.lower() in RESERVED_WORDS:
            return '"' + identifier.replace('"', '""') + '"'
        return identifier

    def adapt_json(self, value: Any) -> Any:
        """Wrap a JSON-bound value for the driver. Identity by default."""
        return value

    def prepare(self, sql: str, parameters: Sequence[Any]) -> tuple[str, list[Any]]:
        """Turn a compiled statement into what the driver's ``cursor.execute`` accepts."""
        return sql, list(parameters)

    @abstractmethod
    def connect(self, url: str) -> Any:
        """Return a new raw driver connection for the given URL.

        The return value is engine-specific (e.g. sqlite3.Connection, psycopg2 connection).
        """
        ...  # pylint: disable=unnecessary-ellipsis
