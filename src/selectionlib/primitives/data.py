"""Data I/O primitives.

Functions for reading and writing pandas DataFrames to/from SQLite tables.
"""

from typing import Any, Union
import pandas as pd

from selectionlib.context import SQLiteContext
from selectionlib.utils.identifiers import quote_identifier


def read_table(
    table: str,
    context: Union[str, SQLiteContext],
    lowercase_columns: bool = False,
    **overrides: Any
) -> pd.DataFrame:
    """Read entire table into pandas DataFrame.

    Example:
        >>> df = read_table("items", context="main")

    Warning:
        Loads entire table into memory. Use a SelectionBuilder query or
        fetch_df() with a WHERE clause for large tables.

    Raises:
        sqlite3.OperationalError: If the table does not exist
    """
    from selectionlib.primitives.execution import fetch_df

    return fetch_df(
        f"SELECT * FROM {quote_identifier(table)}",
        context=context,
        lowercase_columns=lowercase_columns,
        **overrides
    )


def write_table(
    df: pd.DataFrame,
    table: str,
    context: Union[str, SQLiteContext],
    mode: str = "replace",
    **overrides: Any
) -> bool:
    """Write pandas DataFrame to a SQLite table.

    Args:
        df: pandas DataFrame to write (the index is not written)
        table: Table name
        context: SQLiteContext object or profile name
        mode: Write mode - "replace", "append", or "fail" (default: "replace")
            - "replace": Drop table if exists, create new
            - "append": Add to existing table (create if not exists)
            - "fail": Raise error if table exists
        **overrides: Runtime overrides (only used if context is a string)

    Returns:
        True if successful

    Example:
        >>> df = pd.DataFrame({"id": [1, 2], "value": [10, 20]})
        >>> write_table(df, "test_data", context="main", mode="replace")
        True

    Raises:
        ValueError: If mode is not valid or table exists (mode="fail")
    """
    if mode not in ("append", "replace", "fail"):
        raise ValueError(
            f"Invalid mode '{mode}'. Must be 'append', 'replace', or 'fail'"
        )

    from selectionlib.primitives.metadata import table_exists

    if isinstance(context, str):
        context = SQLiteContext(profile=context, **overrides)

    if mode == "fail" and table_exists(table, context=context):
        raise ValueError(f"Table {table} already exists")

    df.to_sql(
        table,
        context.connection,
        if_exists="replace" if mode == "replace" else "append",
        index=False,
    )

    return True
