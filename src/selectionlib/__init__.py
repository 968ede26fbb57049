"""
selectionlib - Python-SQLite selection utilities

Code is organized in layers
- config/ and connection/ open SQLite databases from TOML profiles
- primitives/ wraps sqlite3 in low-level functions
- database.py and builder.py build and run table-level statements
"""

# Layer 1: Core connectivity
from selectionlib.config import load_profile, list_profiles
from selectionlib.connection import SQLiteConnector
from selectionlib.context import SQLiteContext

# Layer 2: Primitives
from selectionlib.primitives import (
    QueryResult,
    Executor,
    execute_sql,
    execute_block,
    fetch_one,
    fetch_all,
    fetch_df,
    query,
    read_table,
    write_table,
    table_exists,
    list_tables,
    get_columns,
)

# Layer 3: Table statements
from selectionlib.database import Driver, SQLiteDatabase
from selectionlib.builder import SelectionBuilder

__version__ = "0.1.0"
__all__ = [
    # Layer 1: Configuration & Connection
    "load_profile",
    "list_profiles",
    "SQLiteConnector",
    "SQLiteContext",
    # Layer 2: Primitives
    "QueryResult",
    "Executor",
    "execute_sql",
    "execute_block",
    "fetch_one",
    "fetch_all",
    "fetch_df",
    "query",
    "read_table",
    "write_table",
    "table_exists",
    "list_tables",
    "get_columns",
    # Layer 3: Table statements
    "Driver",
    "SQLiteDatabase",
    "SelectionBuilder",
]
