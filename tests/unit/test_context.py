"""Unit tests for SQLiteContext class."""

import pytest
from unittest.mock import Mock, patch

from selectionlib.context import SQLiteContext


class TestSQLiteContextInitialization:
    """Tests for SQLiteContext initialization."""

    def test_init_with_profile(self):
        """Test initialization with profile name."""
        ctx = SQLiteContext(profile="test")

        assert ctx._profile == "test"
        assert ctx._connection is None
        assert ctx._cursor is None
        assert ctx._connector is None
        assert ctx._owns_connector is False

    def test_init_with_connection_and_cursor(self):
        """Test initialization with both connection and cursor."""
        mock_conn = Mock()
        mock_cur = Mock()
        ctx = SQLiteContext(connection=mock_conn, cursor=mock_cur)

        assert ctx._profile is None
        assert ctx._connection is mock_conn
        assert ctx._cursor is mock_cur
        assert ctx._owns_connector is False

    def test_init_with_profile_and_overrides(self):
        ctx = SQLiteContext(profile="test", timeout=1.0, database=":memory:")

        assert ctx._overrides == {"timeout": 1.0, "database": ":memory:"}

    def test_init_requires_profile_or_connection(self):
        with pytest.raises(ValueError, match="requires either 'profile' or 'connection'"):
            SQLiteContext()

    def test_init_rejects_profile_and_connection(self):
        with pytest.raises(ValueError, match="not both"):
            SQLiteContext(profile="test", connection=Mock())


class TestSQLiteContextLazyConnection:
    """Tests for lazy connection creation."""

    @patch("selectionlib.connection.SQLiteConnector")
    def test_connection_created_from_profile(self, mock_connector_cls):
        mock_conn = Mock()
        mock_cur = Mock()
        mock_connector_cls.return_value.connect.return_value = (mock_conn, mock_cur)

        ctx = SQLiteContext(profile="dev", timeout=3.0)

        assert ctx.connection is mock_conn
        assert ctx.cursor is mock_cur
        assert ctx._owns_connector is True
        mock_connector_cls.assert_called_once_with(profile="dev", timeout=3.0)

    @patch("selectionlib.connection.SQLiteConnector")
    def test_close_closes_owned_connector(self, mock_connector_cls):
        mock_connector_cls.return_value.connect.return_value = (Mock(), Mock())

        with SQLiteContext(profile="dev") as ctx:
            ctx.connection

        mock_connector_cls.return_value.close.assert_called_once()
        assert ctx._connection is None
        assert ctx._cursor is None

    def test_cursor_created_from_connection(self):
        mock_conn = Mock()
        ctx = SQLiteContext(connection=mock_conn)

        cursor = ctx.cursor

        assert cursor is mock_conn.cursor.return_value
        assert ctx.cursor is cursor
        mock_conn.cursor.assert_called_once()

    def test_close_leaves_external_connection_open(self):
        mock_conn = Mock()
        ctx = SQLiteContext(connection=mock_conn)

        ctx.close()

        mock_conn.close.assert_not_called()
        assert ctx.connection is mock_conn


class TestSQLiteContextProperties:
    """Tests for properties read from a real in-memory database."""

    def test_sqlite_version(self, ctx):
        assert ctx.sqlite_version.count(".") == 2

    def test_database_file_empty_for_memory(self, ctx):
        assert ctx.database_file == ""

    def test_database_file_for_file_database(self, tmp_path):
        import sqlite3

        conn = sqlite3.connect(tmp_path / "file.db")
        try:
            ctx = SQLiteContext(connection=conn)
            assert ctx.database_file.endswith("file.db")
        finally:
            conn.close()

    def test_in_transaction(self, ctx):
        ctx.connection.execute("CREATE TABLE t (x INTEGER)")
        assert ctx.in_transaction is False

        ctx.connection.execute("INSERT INTO t VALUES (1)")
        assert ctx.in_transaction is True

        ctx.connection.commit()
        assert ctx.in_transaction is False

    def test_repr(self, ctx):
        assert repr(ctx) == "SQLiteContext(connection=<active>)"
        assert repr(SQLiteContext(profile="dev")) == "SQLiteContext(profile='dev')"
