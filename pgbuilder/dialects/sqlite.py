"""SQLite dialect, used for local runs and tests of plain SELECT/INSERT statements."""

import json
import logging
import urllib.parse
from typing import Any, ClassVar

from .base import Dialect

logger = logging.getLogger(__name__)


class SqliteDialect(Dialect):
    """Dialect for SQLite (scheme sqlite); numbered ``?NNN`` placeholders.

    JSONB and array operators are PostgreSQL-only and fail at execution here.
    """

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("sqlite",)

    def placeholder(self, index: int) -> str:
        return f"?{index}"

    def adapt_json(self, value: Any) -> Any:
        return json.dumps(value)

    def connect(self, url: str):
        import sqlite3
        parsed = urllib.parse.urlparse(url)
        path = (parsed.path or "")[1:] or parsed.hostname
        logger.debug("Connecting to SQLite database %s", path)
        conn = sqlite3.connect(path)
        conn.execute("PRAGMA foreign_keys = ON")
        return conn
