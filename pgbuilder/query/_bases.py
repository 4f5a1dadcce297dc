"""Shared behaviour of SELECT and INSERT queries: cloning, compiling, executing."""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..compiler import CompiledQuery, render
from ..connection import _get_connection
from ..dialects import Dialect
from ..errors import StructuralBuildError
from ..schema import Schema

logger = logging.getLogger("pgbuilder")


class Query(BaseModel):
    """Immutable query: every builder method returns a new instance.

    ``catalog`` (a Schema) is checked at compile time when set; ``dialect``
    only affects ``compile()`` (execution always uses the connection's dialect).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    connection_name: str = "default"
    catalog: Optional[Schema] = None
    dialect: Optional[Dialect] = None

    def clone_query_with(self, **changes) -> "Query":
        return self.model_copy(update=changes)

    def _render(self, dialect: Dialect | None, adapt_values: bool = False) -> CompiledQuery:
        if self.catalog is not None:
            self.catalog.check(self)
        return render(self, dialect or self.dialect, adapt_values=adapt_values)

    def compile(self, dialect: Dialect | None = None) -> CompiledQuery:
        """Return the SQL text and parameters; PostgreSQL ``$n`` placeholders unless told otherwise."""
        return self._render(dialect)

    def to_sql(self) -> CompiledQuery:
        return self.compile()

    @property
    def sql(self) -> str:
        return self.compile().sql

    @property
    def parameters(self) -> list[Any]:
        return self.compile().parameters

    def execute(self, rows_as_dicts: bool = True) -> list[dict[str, Any]] | list[tuple]:
        """Compile for the configured connection's dialect and run the statement.

        The schema catalog, if any, is checked first. JSON operands are adapted
        for the driver; driver errors propagate unchanged after a rollback.

        Args:
            rows_as_dicts: If True, return list of dicts; otherwise list of tuples.

        Returns:
            Rows produced by the statement (SELECT results or RETURNING rows),
            empty for a plain INSERT.
        """
        connection = _get_connection(self.connection_name)
        try:
            compiled = self._render(connection.dialect, adapt_values=True)
            logger.debug("%s (%d parameters)", compiled.sql, len(compiled.parameters))
            return connection.execute(compiled.sql, compiled.parameters, rows_as_dicts=rows_as_dicts)
        finally:
            connection.close()


def check_pagination(value: Any, name: str) -> int:
    """Validate a LIMIT/OFFSET value: a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise StructuralBuildError(f"{name} must be a non-negative integer; got {value!r}")
    if value < 0:
        raise StructuralBuildError(f"{name} must be a non-negative integer; got {value!r}")
    return value
