"""Helper for building selection clauses for a SQLite database.

Each appended clause is wrapped in parentheses and combined using AND. The
accumulated selection and its arguments are handed to a driver (see
selectionlib.database.Driver) for query, update and delete.

A SelectionBuilder is meant to be created, chained and discarded by a single
caller. It is not thread safe.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from selectionlib.database import Driver

logger = logging.getLogger(__name__)


class SelectionBuilder:
    """Accumulate a WHERE clause and its bound arguments, then execute it.

    Example:
        >>> builder = (
        ...     SelectionBuilder()
        ...     .table("items")
        ...     .where("price > ?", 10)
        ...     .where("name = ?", "widget")
        ... )
        >>> builder.selection()
        '(price > ?) AND (name = ?)'
        >>> builder.selection_args()
        [10, 'widget']
        >>> builder.query(db, ["id", "name"], order_by="name").fetch_all()
    """

    def __init__(self) -> None:
        self._table: Optional[str] = None
        self._projection_map: Optional[dict[str, str]] = None
        self._selection: list[str] = []
        self._selection_args: list[Any] = []

    def table(self, table: str) -> "SelectionBuilder":
        """Set the table (or view, or join expression) statements run against"""
        self._table = table
        return self

    def where(self, selection: Optional[str], *selection_args: Any) -> "SelectionBuilder":
        """Append a selection clause, parenthesized and combined using AND.

        An empty or blank selection is ignored, unless arguments were supplied
        with it.

        Raises:
            ValueError: If arguments are given without a selection
        """
        if selection is None or not selection.strip():
            if selection_args:
                raise ValueError(
                    "Valid selection required when including arguments"
                )
            return self

        self._selection.append(f"({selection})")
        self._selection_args.extend(selection_args)
        return self

    def map(self, from_column: str, to_clause: str) -> "SelectionBuilder":
        """Project from_column as the result of to_clause"""
        self._ensure_projection_map()[from_column] = f"{to_clause} AS {from_column}"
        return self

    def map_to_table(self, column: str, table: str) -> "SelectionBuilder":
        """Qualify column with table, for joins where the name is ambiguous"""
        self._ensure_projection_map()[column] = f"{table}.{column}"
        return self

    def selection(self) -> Optional[str]:
        """The accumulated selection, or None if no clause was appended"""
        if not self._selection:
            return None
        return " AND ".join(self._selection)

    def selection_args(self) -> Optional[list[Any]]:
        """The accumulated selection arguments, or None if there are none"""
        if not self._selection_args:
            return None
        return list(self._selection_args)

    def query(
        self,
        db: Driver,
        columns: Optional[Sequence[str]] = None,
        order_by: Optional[str] = None,
        group_by: Optional[str] = None,
        having: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """Execute a query using the current selection as WHERE clause.

        Requested columns are rewritten through the projection map when one
        is configured; the caller's sequence is left untouched.

        Returns:
            Whatever the driver returns; a QueryResult for SQLiteDatabase

        Raises:
            RuntimeError: If no table was set
        """
        table = self._require_table()
        if columns is not None:
            columns = self._map_columns(columns)
        logger.debug("query %s columns=%s", self, columns)
        return db.query(
            table,
            columns,
            selection=self.selection(),
            selection_args=self.selection_args(),
            group_by=group_by,
            having=having,
            order_by=order_by,
            limit=limit,
        )

    def update(self, db: Driver, values: Mapping[str, Any]) -> int:
        """Execute an update using the current selection as WHERE clause.

        Returns:
            Number of rows the driver reports as updated

        Raises:
            RuntimeError: If no table was set
        """
        table = self._require_table()
        logger.debug("update %s values=%s", self, list(values))
        return db.update(
            table,
            values,
            selection=self.selection(),
            selection_args=self.selection_args(),
        )

    def delete(self, db: Driver) -> int:
        """Execute a delete using the current selection as WHERE clause.

        Returns:
            Number of rows the driver reports as deleted

        Raises:
            RuntimeError: If no table was set
        """
        table = self._require_table()
        logger.debug("delete %s", self)
        return db.delete(
            table,
            selection=self.selection(),
            selection_args=self.selection_args(),
        )

    def describe(self) -> str:
        """Render table, selection and arguments for logs"""
        return (
            f"SelectionBuilder[table={self._table}, selection={self.selection()}, "
            f"selection_args={self.selection_args()}]"
        )

    def _require_table(self) -> str:
        if self._table is None:
            raise RuntimeError("Table not specified")
        return self._table

    def _ensure_projection_map(self) -> dict[str, str]:
        if self._projection_map is None:
            self._projection_map = {}
        return self._projection_map

    def _map_columns(self, columns: Sequence[str]) -> list[str]:
        if self._projection_map is None:
            return list(columns)
        return [self._projection_map.get(column, column) for column in columns]

    def __repr__(self) -> str:
        return self.describe()
