"""Placeholder numbering shared by every clause of one compile pass."""

from typing import Any

from ..dialects import Dialect


class ParameterBinder:
    """Appends bound values and hands out the matching placeholders.

    One binder is threaded through the whole statement, so placeholder numbers
    follow the textual order of the output SQL, starting at 1 with no gaps.
    """

    def __init__(self, dialect: Dialect, adapt_values: bool = False):
        self.dialect = dialect
        self.adapt_values = adapt_values
        self.parameters: list[Any] = []

    def bind(self, value: Any) -> str:
        self.parameters.append(value)
        return self.dialect.placeholder(len(self.parameters))

    def bind_json(self, value: Any) -> str:
        """Bind a document compared with a JSONB operator (``@>``, ``<@``, ``=``)."""
        if self.adapt_values:
            value = self.dialect.adapt_json(value)
        return self.bind(value)

    def quote(self, identifier: str) -> str:
        return self.dialect.quote_identifier(identifier)
