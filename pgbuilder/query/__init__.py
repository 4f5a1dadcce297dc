from ._bases import Query, check_pagination
from .select import SelectQuery, JoinClause
from .insert import InsertQuery, OnConflict, DoNothing, DoUpdate, DO_NOTHING, do_update, excluded
