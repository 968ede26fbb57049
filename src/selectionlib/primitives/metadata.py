"""Metadata query primitives.

Functions for querying SQLite schema metadata (tables and columns).
"""

from typing import Any, Union

from selectionlib.context import SQLiteContext
from selectionlib.utils.identifiers import quote_identifier


def table_exists(
    table: str,
    context: Union[str, SQLiteContext],
    **overrides: Any
) -> bool:
    """Check whether a table or view exists in the main database.

    Example:
        >>> table_exists("items", context="main")
        True
    """
    from selectionlib.primitives.execution import fetch_one

    row = fetch_one(
        "SELECT 1 FROM sqlite_master WHERE type IN ('table', 'view') AND name = ?",
        context=context,
        bindings=[table],
        **overrides
    )
    return row is not None


def list_tables(
    context: Union[str, SQLiteContext],
    include_views: bool = False,
    **overrides: Any
) -> list[str]:
    """List user tables (and optionally views), sorted by name.

    Internal sqlite_* tables are excluded.

    Example:
        >>> list_tables(context="main")
        ['articles', 'items']
    """
    from selectionlib.primitives.execution import fetch_all

    types = ("table", "view") if include_views else ("table",)
    placeholders = ", ".join("?" for _ in types)
    rows = fetch_all(
        f"SELECT name FROM sqlite_master WHERE type IN ({placeholders}) "
        "AND name NOT LIKE 'sqlite_%' ORDER BY name",
        context=context,
        bindings=list(types),
        **overrides
    )
    return [row[0] for row in rows]


def get_columns(
    table: str,
    context: Union[str, SQLiteContext],
    **overrides: Any
) -> list[str]:
    """Get column names of a table or view in declaration order.

    Returns an empty list when the table does not exist.

    Example:
        >>> get_columns("items", context="main")
        ['id', 'name', 'price']
    """
    from selectionlib.primitives.execution import fetch_all

    rows = fetch_all(
        f"PRAGMA table_info({quote_identifier(table)})",
        context=context,
        **overrides
    )
    # table_info rows: (cid, name, type, notnull, dflt_value, pk)
    return [row[1] for row in rows]
