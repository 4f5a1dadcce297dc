"""Errors raised while building and compiling queries.

Driver errors are never wrapped here: they propagate unchanged from
``Connection.execute``.
"""


class QueryBuildError(ValueError):
    """Base for errors detected before a statement reaches the database."""


class StructuralBuildError(QueryBuildError):
    """Malformed builder input (table/column text, operator, pagination, rows...)."""


class SchemaValidationError(QueryBuildError):
    """A query references a table, alias or column unknown to the schema catalog."""
