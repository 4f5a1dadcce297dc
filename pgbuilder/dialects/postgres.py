"""PostgreSQL dialect."""

import re
import urllib.parse
from typing import Any, ClassVar, Sequence

from .base import Dialect

# quoted literals and identifiers are matched first and left untouched
_PLACEHOLDER = re.compile(r"'(?:[^']|'')*'" r'|"(?:[^"]|"")*"' r"|\$(\d+)")


class PostgresDialect(Dialect):
    """Dialect for PostgreSQL (schemes postgresql, postgres).

    Statements are compiled with ``$1..$n``; psycopg2 expects ``%s``, so
    ``prepare`` rewrites each placeholder in order of appearance, reorders the
    parameters to match, and escapes literal ``%``. Text inside
    '...' literals and "..." identifiers is never treated as a placeholder.
    """

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("postgresql", "postgres")

    def placeholder(self, index: int) -> str:
        return f"${index}"

    def adapt_json(self, value: Any) -> Any:
        from psycopg2.extras import Json
        return Json(value)

    def prepare(self, sql: str, parameters: Sequence[Any]) -> tuple[str, list[Any]]:
        parameters = list(parameters)
        ordered = []

        def substitute(match: re.Match) -> str:
            if match.group(1) is None:
                return match.group(0)
            ordered.append(parameters[int(match.group(1)) - 1])
            return "%s"

        return _PLACEHOLDER.sub(substitute, sql.replace("%", "%%")), ordered

    def connect(self, url: str):
        import psycopg2
        parsed = urllib.parse.urlparse(url)
        return psycopg2.connect(
            host=parsed.hostname,
            user=parsed.username,
            password=parsed.password,
            database=(parsed.path or "")[1:] or None,
            port=parsed.port,
        )
