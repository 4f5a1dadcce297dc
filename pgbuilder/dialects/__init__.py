"""Database dialects: one class per engine (PostgreSQL, SQLite)."""

from .base import Dialect, RESERVED_WORDS
from .sqlite import SqliteDialect
from .postgres import PostgresDialect

_DIALECT_CLASSES: tuple[type[Dialect], ...] = (
    PostgresDialect,
    SqliteDialect,
)


def get_dialect_for_scheme(scheme: str) -> Dialect:
    """Return a Dialect instance for the given URL scheme (e.g. 'postgresql', 'sqlite')."""
    normalized = (scheme or "").split("+")[0].lower()
    for dialect_cls in _DIALECT_CLASSES:
        if normalized in dialect_cls.SUPPORTED_SCHEMA:
            return dialect_cls()
    raise ValueError(f"Unsupported database scheme: {scheme}")


__all__ = [
    "Dialect",
    "RESERVED_WORDS",
    "SqliteDialect",
    "PostgresDialect",
    "get_dialect_for_scheme",
]
