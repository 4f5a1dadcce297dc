"""Entry point for building queries against a named connection."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .dialects import Dialect
from .errors import StructuralBuildError
from .expressions import resolve_table_expression
from .query import InsertQuery, SelectQuery
from .schema import Schema


class Database(BaseModel):
    """Query factory bound to a connection name, an optional catalog and dialect.

        connect("postgresql://app@localhost/app")
        db = Database()
        db.select_from("users as u").where("u.id", "=", 1).execute()
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    connection_name: str = "default"
    catalog: Optional[Schema] = None
    dialect: Optional[Dialect] = None

    def _settings(self) -> dict:
        return {
            "connection_name": self.connection_name,
            "catalog": self.catalog,
            "dialect": self.dialect,
        }

    def select_from(self, *tables: str) -> SelectQuery:
        """Start a SELECT over one or more comma-separated sources (``"users as u"``)."""
        if not tables:
            raise StructuralBuildError("select_from() needs at least one table")
        return SelectQuery(
            sources=tuple(resolve_table_expression(table) for table in tables),
            **self._settings(),
        )

    def insert_into(self, table: str) -> InsertQuery:
        return InsertQuery(target=resolve_table_expression(table), **self._settings())


def select_from(*tables: str) -> SelectQuery:
    return Database().select_from(*tables)


def insert_into(table: str) -> InsertQuery:
    return Database().insert_into(table)
