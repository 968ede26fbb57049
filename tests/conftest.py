"""Pytest configuration and shared fixtures.

Every test runs against throwaway SQLite databases, either in memory or
under pytest's tmp_path, so no profile setup is needed on the machine.
"""

import os
import sqlite3
import tempfile
from pathlib import Path
from typing import Iterator

# Keep the library's configuration directory out of the user's home
os.environ.setdefault("SELECTIONLIB_CONFIG_DIR", tempfile.mkdtemp(prefix="selectionlib-"))

import pytest  # noqa: E402

from selectionlib.context import SQLiteContext  # noqa: E402
from selectionlib.database import SQLiteDatabase  # noqa: E402


ITEMS_SCHEMA = """
CREATE TABLE items (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    price INTEGER,
    status TEXT DEFAULT 'new'
);
INSERT INTO items (name, price) VALUES ('widget', 12);
INSERT INTO items (name, price) VALUES ('gadget', 8);
INSERT INTO items (name, price) VALUES ('gizmo', 25);
INSERT INTO items (name, price) VALUES ('doohickey', NULL);
"""


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """connections.toml with a file-backed profile and an in-memory profile."""
    db_path = (tmp_path / "test.db").as_posix()
    config_content = f"""
[default]
database = "{db_path}"
timeout = 2.5

[default.pragmas]
foreign_keys = "ON"
user_version = 7

[scratch]
database = ":memory:"
"""
    config_path = tmp_path / "connections.toml"
    config_path.write_text(config_content)
    return config_path


@pytest.fixture
def memory_connection() -> Iterator[sqlite3.Connection]:
    """An in-memory SQLite connection, closed after the test."""
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def ctx(memory_connection: sqlite3.Connection) -> SQLiteContext:
    """SQLiteContext over an in-memory connection."""
    return SQLiteContext(connection=memory_connection)


@pytest.fixture
def items_db(tmp_path: Path) -> Iterator[SQLiteDatabase]:
    """SQLiteDatabase over a file database seeded with an items table."""
    conn = sqlite3.connect(tmp_path / "items.db")
    conn.executescript(ITEMS_SCHEMA)
    db = SQLiteDatabase(conn)
    yield db
    conn.close()
