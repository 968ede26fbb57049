"""Primitive operations wrapping direct sqlite3 calls"""

from selectionlib.context import SQLiteContext
from selectionlib.primitives.result import QueryResult

from selectionlib.primitives.execution import (
    Executor,
    execute_sql,
    fetch_one,
    fetch_all,
    fetch_df,
    execute_block,
    query,
)

from selectionlib.primitives.data import (
    read_table,
    write_table,
)

from selectionlib.primitives.metadata import (
    get_columns,
    table_exists,
    list_tables,
)

__all__ = [
    # Context
    "SQLiteContext",
    "QueryResult",
    # Execution
    "Executor",
    "execute_sql",
    "fetch_one",
    "fetch_all",
    "fetch_df",
    "execute_block",
    "query",
    # Data I/O
    "read_table",
    "write_table",
    # Metadata
    "get_columns",
    "table_exists",
    "list_tables",
]
