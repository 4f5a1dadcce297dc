"""INSERT queries with ON CONFLICT and RETURNING."""

from typing import Any, Iterable, Literal, Mapping, Optional

from ._bases import Query
from ..errors import StructuralBuildError
from ..expressions import ColumnReference, Node, TableReference, parse_column_reference


class DoNothing(Node):
    kind: Literal["nothing"] = "nothing"


class DoUpdate(Node):
    """``DO UPDATE SET column = value, ...``; values may be ``excluded("col")`` or expressions."""

    kind: Literal["update"] = "update"
    assignments: tuple[tuple[str, Any], ...]


DO_NOTHING = DoNothing()


def do_update(assignments: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> DoUpdate:
    """``do_update({"name": excluded("name")})`` or ``do_update(name="x")``."""
    merged = dict(assignments or {}, **kwargs)
    if not merged:
        raise StructuralBuildError("do_update() needs at least one assignment")
    return DoUpdate(assignments=tuple(merged.items()))


def excluded(column: str) -> ColumnReference:
    """The proposed value of ``column`` in an ON CONFLICT update (``EXCLUDED.column``)."""
    return ColumnReference(qualifier="EXCLUDED", name=column)


class OnConflict(Node):
    columns: tuple[str, ...] = ()
    constraint: Optional[str] = None
    action: DoNothing | DoUpdate = DO_NOTHING


class InsertQuery(Query):
    """``INSERT INTO table (columns) VALUES (...), ...``.

    Column order comes from the first row; every other row must have the
    same keys. Without rows the statement inserts ``DEFAULT VALUES``.
    Placeholders number the VALUES row by row, then the ON CONFLICT update.
    """

    kind: Literal["insert"] = "insert"
    target: TableReference
    columns: tuple[str, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = ()
    conflict: Optional[OnConflict] = None
    returning_columns: Optional[tuple[ColumnReference, ...]] = None
    """None: no RETURNING clause; empty: ``RETURNING *``."""

    def values(self, rows: Mapping[str, Any] | Iterable[Mapping[str, Any]]) -> "InsertQuery":
        """Set the rows to insert (a dict or a list of dicts); replaces earlier rows."""
        if isinstance(rows, Mapping):
            rows = [rows]
        rows = list(rows)
        if not rows:
            raise StructuralBuildError("values() needs at least one row")
        for row in rows:
            if not isinstance(row, Mapping):
                raise StructuralBuildError(f"Insert rows must be mappings; got {type(row)}")
        columns = tuple(rows[0])
        for index, row in enumerate(rows[1:], start=1):
            if set(row) != set(columns):
                raise StructuralBuildError(
                    f"Row {index} has columns {sorted(row)}; expected {sorted(columns)} as in the first row"
                )
        if not columns and len(rows) > 1:
            raise StructuralBuildError("Only a single row can insert DEFAULT VALUES")
        return self.clone_query_with(
            columns=columns,
            rows=tuple(tuple(row[column] for column in columns) for row in rows),
        )

    def on_conflict(
        self,
        columns: Optional[str | Iterable[str]] = None,
        action: DoNothing | DoUpdate = DO_NOTHING,
        constraint: Optional[str] = None,
    ) -> "InsertQuery":
        """``ON CONFLICT [(columns) | ON CONSTRAINT name] DO NOTHING | DO UPDATE SET ...``."""
        if isinstance(columns, str):
            columns = [columns]
        columns = tuple(columns or ())
        if columns and constraint is not None:
            raise StructuralBuildError("on_conflict() takes either columns or a constraint, not both")
        if isinstance(action, DoUpdate) and not columns and constraint is None:
            raise StructuralBuildError("ON CONFLICT DO UPDATE requires conflict columns or a constraint")
        if not isinstance(action, (DoNothing, DoUpdate)):
            raise StructuralBuildError(f"Unsupported conflict action {action!r}")
        return self.clone_query_with(
            conflict=OnConflict(columns=columns, constraint=constraint, action=action)
        )

    def returning(self, columns: Optional[str | Iterable[str]] = None) -> "InsertQuery":
        """Add ``RETURNING`` for ``columns``; no columns means ``RETURNING *``."""
        if isinstance(columns, (str, ColumnReference)):
            columns = [columns]
        return self.clone_query_with(
            returning_columns=tuple(parse_column_reference(column) for column in columns or ())
        )

    def returning_all(self) -> "InsertQuery":
        return self.clone_query_with(returning_columns=())
