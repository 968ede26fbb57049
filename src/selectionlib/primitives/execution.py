"""SQL execution primitives.

Plain functions for executing SQL statements and fetching results.
These are thin wrappers around sqlite3 connection and cursor operations;
every statement runs on its own cursor so results stay independent.
"""

import logging
from typing import Any, Optional, Sequence, Union

import pandas as pd

from selectionlib.context import SQLiteContext
from selectionlib.primitives.result import QueryResult

logger = logging.getLogger(__name__)


class Executor:
    """Execute SQL statements against a SQLiteContext"""

    def __init__(self, context: Union[str, SQLiteContext], **overrides: Any):
        """Initialize with a profile name or SQLiteContext instance"""
        if isinstance(context, str):
            self.context = SQLiteContext(profile=context, **overrides)
        else:
            self.context = context

    def run(
        self,
        sql: str,
        bindings: Optional[Sequence[Any]] = None
    ) -> QueryResult:
        """Execute SQL on a fresh cursor and return a QueryResult"""
        logger.debug("Executing SQL: %s bindings=%r", sql, bindings)
        if bindings is None:
            cursor = self.context.connection.execute(sql)
        else:
            cursor = self.context.connection.execute(sql, tuple(bindings))
        return QueryResult(_cursor=cursor, sql=sql)

    def run_block(self, sql: str) -> None:
        """Execute a block of semicolon-separated statements as a script"""
        logger.debug("Executing SQL script (%d chars)", len(sql))
        self.context.connection.executescript(sql)


def execute_sql(
    sql: str,
    context: Union[str, SQLiteContext],
    bindings: Optional[Sequence[Any]] = None,
    **overrides: Any
) -> QueryResult:
    """Execute SQL statement and return result with metadata.

    Use for: DDL (CREATE/DROP/ALTER), DML (INSERT/UPDATE/DELETE)

    Args:
        sql: SQL statement to execute, with '?' placeholders
        context: SQLiteContext object or profile name
        bindings: Values for the placeholders, in order
        **overrides: Runtime overrides for connection creation (only used if context is a string)

    Returns:
        QueryResult object with access to rowcount, lastrowid, and metadata

    Example:
        >>> result = execute_sql("DELETE FROM items WHERE price < ?", context="main", bindings=[10])
        >>> print(f"Deleted {result.rowcount} rows")

    Raises:
        sqlite3.Error: Any SQLite error, unchanged
    """
    return Executor(context, **overrides).run(sql, bindings=bindings)


def fetch_one(
    sql: str,
    context: Union[str, SQLiteContext],
    bindings: Optional[Sequence[Any]] = None,
    **overrides: Any
) -> Optional[tuple[Any, ...]]:
    """Execute query and return first row as tuple, or None if no results.

    Example:
        >>> row = fetch_one("SELECT COUNT(*) FROM items", context="main")
        >>> count = row[0]
    """
    return Executor(context, **overrides).run(sql, bindings=bindings).fetch_one()


def fetch_all(
    sql: str,
    context: Union[str, SQLiteContext],
    bindings: Optional[Sequence[Any]] = None,
    **overrides: Any
) -> list[tuple[Any, ...]]:
    """Execute query and return all rows as list of tuples.

    Warning:
        Loads all results into memory. Use QueryResult.fetch_batches() for large result sets.
    """
    return Executor(context, **overrides).run(sql, bindings=bindings).fetch_all()


def fetch_df(
    sql: str,
    context: Union[str, SQLiteContext],
    bindings: Optional[Sequence[Any]] = None,
    lowercase_columns: bool = False,
    **overrides: Any
) -> pd.DataFrame:
    """Execute query and return pandas DataFrame.

    Example:
        >>> df = fetch_df("SELECT * FROM items WHERE price > ?", context="main", bindings=[10])
        >>> print(df.shape)
        (15, 4)
    """
    result = Executor(context, **overrides).run(sql, bindings=bindings)
    return result.to_df(lowercase_columns=lowercase_columns)


def execute_block(
    sql: str,
    context: Union[str, SQLiteContext],
    **overrides: Any
) -> None:
    """Execute a block of SQL statements as a script.

    Useful for schema setup and fixtures. sqlite3 commits any pending
    transaction before running the script.

    Example:
        >>> execute_block('''
        ... CREATE TABLE items (id INTEGER PRIMARY KEY, name TEXT);
        ... INSERT INTO items (name) VALUES ('widget');
        ... ''', context="main")
    """
    Executor(context, **overrides).run_block(sql)


def query(
    sql: str,
    context: Union[str, SQLiteContext],
    bindings: Optional[Sequence[Any]] = None,
    **overrides: Any
) -> pd.DataFrame:
    """Execute SQL and return results as a DataFrame"""
    return Executor(context, **overrides).run(sql, bindings=bindings).to_df()
