"""pgbuilder: immutable SQL query builder compiling to PostgreSQL ``$n`` statements."""

from .connection import connect
from .database import Database, select_from, insert_into
from .errors import QueryBuildError, StructuralBuildError, SchemaValidationError
from .expressions import and_, or_, not_, eb, jsonb, array, ref, sql, raw
from .query import DO_NOTHING, do_update, excluded
from .schema import Schema
