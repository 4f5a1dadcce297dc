"""Named database URLs and the thin DB-API wrapper queries execute through."""

import logging
import urllib.parse
from typing import Any, Callable, Sequence

from .dialects import Dialect, get_dialect_for_scheme

logger = logging.getLogger("pgbuilder")

_urls: dict[str, str | Callable[[], str]] = {}


def connect(database_url: str | Callable[[], str], name: str = "default") -> None:
    """Register ``database_url`` under ``name``.

    The URL may be a callable returning the URL, resolved each time a
    connection is opened (e.g. to read it from the environment lazily).
    Nothing is opened here.
    """
    if not isinstance(database_url, str) and not callable(database_url):
        raise ValueError(f"database_url must be a str or a callable returning a str; got {type(database_url)}")
    _urls[name] = database_url


class Connection:
    """A raw driver connection together with the dialect that opened it."""

    def __init__(self, raw: Any, dialect: Dialect):
        self.raw = raw
        self.dialect = dialect

    def execute(
        self,
        sql: str,
        parameters: Sequence[Any] = (),
        rows_as_dicts: bool = False,
    ) -> list[tuple] | list[dict[str, Any]]:
        """Run one compiled statement and commit it.

        Driver errors roll the transaction back and propagate unchanged.
        Returns the fetched rows (empty when the statement produces none).
        """
        sql, parameters = self.dialect.prepare(sql, parameters)
        cursor = self.raw.cursor()
        try:
            cursor.execute(sql, parameters)
            columns = [description[0] for description in cursor.description or ()]
            rows = cursor.fetchall() if columns else []
            self.raw.commit()
        except Exception:
            self.raw.rollback()
            raise
        finally:
            cursor.close()
        if rows_as_dicts:
            return [dict(zip(columns, row)) for row in rows]
        return [tuple(row) for row in rows]

    def close(self) -> None:
        self.raw.close()


def _get_connection(name: str = "default") -> Connection:
    try:
        url = _urls[name]
    except KeyError as error:
        raise ValueError(f"No connection configured with name=`{name}`") from error
    if callable(url):
        url = url()
    dialect = get_dialect_for_scheme(urllib.parse.urlparse(url).scheme)
    logger.debug("Opening %s connection `%s`", type(dialect).__name__, name)
    return Connection(dialect.connect(url), dialect)
