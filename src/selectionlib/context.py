"""SQLite connection context management"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from selectionlib.connection import SQLiteConnector


class SQLiteContext:
    """Manages SQLite connection and cursor lifecycle with lazy initialization.

    You can:
    - Pass a profile name (opens the database on demand)
    - Pass an existing connection (creates cursor on demand)
    - Pass both connection and cursor (reuses both)

    Example:
        >>> ctx = SQLiteContext(profile="dev")
        >>> execute_sql("CREATE TABLE test (id INTEGER)", context=ctx)
        >>> df = fetch_df("SELECT * FROM test", context=ctx)

        >>> conn = sqlite3.connect(":memory:")
        >>> ctx = SQLiteContext(connection=conn)

    Note:
        When using profile-based initialization, the context manages its own
        connector lifecycle. When using an explicit connection/cursor, the caller
        is responsible for closing them.
    """

    def __init__(
        self,
        profile: Optional[str] = None,
        connection: Optional[Any] = None,
        cursor: Optional[Any] = None,
        **overrides: Any,
    ):
        """Initialize SQLite context with profile or connection"""
        if profile is None and connection is None:
            raise ValueError(
                "SQLiteContext requires either 'profile' or 'connection'. " +
                "Cannot create context without a connection source."
            )
        if profile is not None and connection is not None:
            raise ValueError(
                "SQLiteContext: provide either 'profile' or 'connection', not both"
            )

        self._profile = profile
        self._connection = connection
        self._cursor = cursor
        self._overrides = overrides
        self._connector: Optional["SQLiteConnector"] = None
        self._owns_connector = False

    @property
    def connection(self) -> Any:
        """Get SQLite connection, opening it if needed"""
        if self._connection is None:
            from selectionlib.connection import SQLiteConnector

            assert self._profile is not None
            self._connector = SQLiteConnector(
                profile=self._profile, **self._overrides
            )
            conn, cur = self._connector.connect()
            self._connection = conn
            self._cursor = cur
            self._owns_connector = True

        return self._connection

    @property
    def cursor(self) -> Any:
        """Get SQLite cursor, creating if needed"""
        if self._cursor is None:
            self._cursor = self.connection.cursor()

        return self._cursor

    def close(self) -> None:
        """Close connection if owned by this context"""
        if self._owns_connector and self._connector is not None:
            self._connector.close()
            self._connector = None
            self._connection = None
            self._cursor = None
            self._owns_connector = False

    def __enter__(self) -> "SQLiteContext":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()

    @property
    def in_transaction(self) -> bool:
        """Whether the connection has an open transaction"""
        return bool(self.connection.in_transaction)

    @property
    def sqlite_version(self) -> str:
        """Version of the SQLite library behind the connection"""
        result = self.cursor.execute("SELECT sqlite_version()").fetchone()
        return str(result[0]) if result and result[0] else ""

    @property
    def database_file(self) -> str:
        """File backing the main database, empty for in-memory databases"""
        for _seq, name, path in self.cursor.execute("PRAGMA database_list").fetchall():
            if name == "main":
                return path or ""
        return ""

    def __repr__(self) -> str:
        """String representation"""
        if self._connection is not None:
            return "SQLiteContext(connection=<active>)"
        else:
            return f"SQLiteContext(profile='{self._profile}')"
