"""SQLite connection management with profile support."""

import sqlite3
from typing import Optional, Tuple, Any, Literal

from .base import BaseConnector, pragma_statements


class SQLiteConnector(BaseConnector):
    """
    SQLite connection manager with TOML profile support and context manager protocol.

    This class loads connection parameters from a TOML configuration file and manages
    the connection lifecycle. It implements the context manager protocol for automatic
    resource cleanup.

    Args:
        profile: Name of the profile to load from connections.toml
        **kwargs: Additional connection parameters to override profile settings

    Example:
        >>> with SQLiteConnector(profile="dev") as (conn, cur):
        ...     cur.execute("SELECT sqlite_version()")
        ...     print(cur.fetchone())

        >>> # Override the database file from the profile
        >>> with SQLiteConnector(profile="dev", database="/tmp/copy.db") as (conn, cur):
        ...     cur.execute("SELECT COUNT(*) FROM articles")
    """

    def __init__(self, profile: str, **kwargs: Any) -> None:
        """
        Initialize the connector with a configuration profile.

        Args:
            profile: Name of the connection profile to load
            **kwargs: Override any connection parameters from the profile
        """
        super().__init__(profile, **kwargs)

        # Connection and cursor initialized lazily
        self._connection: Optional[sqlite3.Connection] = None
        self._cursor: Optional[sqlite3.Cursor] = None

    def connect(self) -> Tuple[sqlite3.Connection, sqlite3.Cursor]:
        """
        Open the SQLite database if not already open and apply profile PRAGMAs.

        Returns:
            Tuple of (connection, cursor) objects
        """
        if self._connection is None:
            self._connection = sqlite3.connect(**self.connect_kwargs())
            self._cursor = self._connection.cursor()
            for statement in pragma_statements(self.pragmas):
                self._cursor.execute(statement)

        assert self._connection is not None
        assert self._cursor is not None
        return self._connection, self._cursor

    def close(self) -> None:
        """Close the cursor and connection, releasing resources."""
        if self._cursor:
            self._cursor.close()
            self._cursor = None
        if self._connection:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> Tuple[sqlite3.Connection, sqlite3.Cursor]:
        """Context manager entry: open the connection."""
        return self.connect()

    def __exit__(
        self,
        exc_type: Any,
        exc_val: Any,
        exc_tb: Any
    ) -> Literal[False]:
        """
        Context manager exit: close connection.

        Always returns False to propagate any exceptions.
        """
        self.close()
        return False

    def __repr__(self) -> str:
        """String representation of the connector."""
        status = "connected" if self._connection else "not connected"
        return f"SQLiteConnector(profile='{self._profile}', {status})"
