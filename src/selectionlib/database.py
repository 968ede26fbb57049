"""Table-level query, update, delete and insert on top of sqlite3.

SQLiteDatabase is the driver surface a SelectionBuilder delegates to. Any
object implementing the Driver protocol can stand in for it.
"""

import sqlite3
from typing import Any, Mapping, Optional, Protocol, Sequence, Union

from selectionlib.context import SQLiteContext
from selectionlib.primitives.execution import Executor
from selectionlib.primitives.result import QueryResult
from selectionlib.utils.identifiers import is_valid_identifier
from selectionlib.utils.query import SafeQuery


class Driver(Protocol):
    """Protocol for the database handle a SelectionBuilder executes against"""

    def query(
        self,
        table: str,
        columns: Optional[Sequence[str]] = None,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
        group_by: Optional[str] = None,
        having: Optional[str] = None,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Any:
        ...

    def update(
        self,
        table: str,
        values: Mapping[str, Any],
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> int:
        ...

    def delete(
        self,
        table: str,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> int:
        ...


class SQLiteDatabase:
    """Execute table-level statements against a SQLite database.

    Table names and selection fragments are inserted into the statement as
    given; only values travel as bound parameters. Write statements commit
    on their own unless the caller already has a transaction open on the
    connection, in which case committing is left to the caller.

    Example:
        >>> db = SQLiteDatabase("main")
        >>> db.insert("items", {"name": "widget", "price": 12})
        1
        >>> db.update("items", {"price": 15}, "name = ?", ["widget"])
        1
        >>> db.query("items", ["name"], "price > ?", [10]).fetch_all()
        [('widget',)]
    """

    def __init__(
        self,
        context: Union[str, SQLiteContext, sqlite3.Connection],
        **overrides: Any
    ):
        """Initialize with a profile name, SQLiteContext or open sqlite3 connection"""
        if isinstance(context, sqlite3.Connection):
            context = SQLiteContext(connection=context)
        self._executor = Executor(context, **overrides)

    @property
    def context(self) -> SQLiteContext:
        return self._executor.context

    def query(
        self,
        table: str,
        columns: Optional[Sequence[str]] = None,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
        group_by: Optional[str] = None,
        having: Optional[str] = None,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
        distinct: bool = False,
    ) -> QueryResult:
        """Run a SELECT against table and return the open result.

        Args:
            table: Table (or view, or join expression) to select from
            columns: Result columns; None selects every column
            selection: WHERE clause without the WHERE keyword, with '?' placeholders
            selection_args: Values for the placeholders in selection
            group_by: GROUP BY clause without the keywords
            having: HAVING clause, only valid together with group_by
            order_by: ORDER BY clause without the keywords
            limit: Maximum number of rows
            distinct: Whether to SELECT DISTINCT

        Raises:
            ValueError: If having is given without group_by, or arguments without a selection
            sqlite3.Error: Any SQLite error, unchanged
        """
        if having and not group_by:
            raise ValueError(
                "HAVING clauses are only permitted when using a GROUP BY clause"
            )
        self._check_selection(selection, selection_args)

        projection = ", ".join(columns) if columns else "*"
        keyword = "SELECT DISTINCT" if distinct else "SELECT"
        statement = (
            SafeQuery(f"{keyword} {projection} FROM {table}")
            .when(selection, f"WHERE {selection}", *(selection_args or ()))
            .when(group_by, f"GROUP BY {group_by}")
            .when(having, f"HAVING {having}")
            .when(order_by, f"ORDER BY {order_by}")
            .when(limit is not None, "LIMIT ?", limit)
        )
        sql, bindings = statement.as_tuple()
        return self._executor.run(sql, bindings)

    def update(
        self,
        table: str,
        values: Mapping[str, Any],
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> int:
        """Update rows matching selection (every row when None) and return how many changed.

        Raises:
            ValueError: If values is empty or names an invalid column
            sqlite3.Error: Any SQLite error, unchanged
        """
        if not values:
            raise ValueError("Empty values")
        self._check_columns(values)
        self._check_selection(selection, selection_args)

        assignments = ", ".join(f"{column} = ?" for column in values)
        statement = (
            SafeQuery(f"UPDATE {table}")
            .add(f"SET {assignments}", *values.values())
            .when(selection, f"WHERE {selection}", *(selection_args or ()))
        )
        return self._write(statement).rowcount

    def delete(
        self,
        table: str,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> int:
        """Delete rows matching selection (every row when None) and return how many were removed.

        Raises:
            sqlite3.Error: Any SQLite error, unchanged
        """
        self._check_selection(selection, selection_args)

        statement = SafeQuery(f"DELETE FROM {table}").when(
            selection, f"WHERE {selection}", *(selection_args or ())
        )
        return self._write(statement).rowcount

    def insert(self, table: str, values: Mapping[str, Any]) -> Optional[int]:
        """Insert one row and return its row id. Empty values insert a row of defaults.

        Raises:
            ValueError: If values names an invalid column
            sqlite3.Error: Any SQLite error, unchanged
        """
        self._check_columns(values)

        if values:
            columns = ", ".join(values)
            placeholders = ", ".join("?" for _ in values)
            statement = SafeQuery(f"INSERT INTO {table} ({columns})").add(
                f"VALUES ({placeholders})", *values.values()
            )
        else:
            statement = SafeQuery(f"INSERT INTO {table} DEFAULT VALUES")
        return self._write(statement).lastrowid

    def close(self) -> None:
        """Close the connection if the underlying context owns it"""
        self.context.close()

    def __enter__(self) -> "SQLiteDatabase":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _write(self, statement: SafeQuery) -> QueryResult:
        sql, bindings = statement.as_tuple()
        connection = self.context.connection
        owns_transaction = not connection.in_transaction
        try:
            result = self._executor.run(sql, bindings)
        except sqlite3.Error:
            if owns_transaction and connection.in_transaction:
                connection.rollback()
            raise
        if owns_transaction:
            connection.commit()
        return result

    @staticmethod
    def _check_columns(values: Mapping[str, Any]) -> None:
        invalid = [column for column in values if not is_valid_identifier(column)]
        if invalid:
            raise ValueError(f"Invalid column names: {invalid}")

    @staticmethod
    def _check_selection(
        selection: Optional[str],
        selection_args: Optional[Sequence[Any]]
    ) -> None:
        if not selection and selection_args:
            raise ValueError("Selection arguments supplied without a selection")

    def __repr__(self) -> str:
        return f"SQLiteDatabase(context={self.context!r})"
