"""Integration tests for metadata and data I/O primitives.

All tests share a file-backed SQLiteContext per test.
"""

import sqlite3
from typing import Iterator

import pandas as pd
import pytest

from selectionlib.primitives import (
    SQLiteContext,
    execute_block,
    execute_sql,
    fetch_df,
    get_columns,
    list_tables,
    read_table,
    table_exists,
    write_table,
)


pytestmark = pytest.mark.integration


@pytest.fixture
def file_ctx(tmp_path) -> Iterator[SQLiteContext]:
    conn = sqlite3.connect(tmp_path / "primitives.db")
    context = SQLiteContext(connection=conn)
    execute_block(
        """
        CREATE TABLE sales (id INTEGER PRIMARY KEY, region TEXT, amount REAL);
        CREATE VIEW big_sales AS SELECT * FROM sales WHERE amount > 100;
        INSERT INTO sales (region, amount) VALUES ('north', 50), ('south', 250);
        """,
        context=context,
    )
    yield context
    conn.close()


class TestMetadata:
    """Tests for table_exists, list_tables and get_columns."""

    def test_table_exists(self, file_ctx):
        assert table_exists("sales", context=file_ctx)
        assert table_exists("big_sales", context=file_ctx)
        assert not table_exists("nope", context=file_ctx)

    def test_list_tables(self, file_ctx):
        execute_sql("CREATE TABLE archive (id INTEGER)", context=file_ctx)

        assert list_tables(context=file_ctx) == ["archive", "sales"]
        assert list_tables(context=file_ctx, include_views=True) == ["archive", "big_sales", "sales"]

    def test_get_columns(self, file_ctx):
        assert get_columns("sales", context=file_ctx) == ["id", "region", "amount"]

    def test_get_columns_missing_table(self, file_ctx):
        assert get_columns("nope", context=file_ctx) == []


class TestDataIO:
    """Tests for read_table and write_table."""

    def test_read_table(self, file_ctx):
        df = read_table("sales", context=file_ctx)

        assert list(df.columns) == ["id", "region", "amount"]
        assert df["region"].tolist() == ["north", "south"]

    def test_read_missing_table(self, file_ctx):
        with pytest.raises(sqlite3.OperationalError):
            read_table("nope", context=file_ctx)

    def test_write_table_replace(self, file_ctx):
        df = pd.DataFrame({"region": ["east"], "amount": [10.0]})

        assert write_table(df, "sales", context=file_ctx, mode="replace") is True

        result = read_table("sales", context=file_ctx)
        assert list(result.columns) == ["region", "amount"]
        assert len(result) == 1

    def test_write_table_append(self, file_ctx):
        df = pd.DataFrame({"region": ["east"], "amount": [75.0]})

        write_table(df, "sales", context=file_ctx, mode="append")

        totals = fetch_df("SELECT COUNT(*) AS n FROM sales", context=file_ctx)
        assert totals["n"].iloc[0] == 3

    def test_write_table_fail_mode_on_existing(self, file_ctx):
        df = pd.DataFrame({"region": ["east"], "amount": [1.0]})

        with pytest.raises(ValueError, match="already exists"):
            write_table(df, "sales", context=file_ctx, mode="fail")

    def test_write_table_fail_mode_creates_new(self, file_ctx):
        df = pd.DataFrame({"sku": ["a", "b"]})

        write_table(df, "products", context=file_ctx, mode="fail")

        assert read_table("products", context=file_ctx)["sku"].tolist() == ["a", "b"]

    def test_write_table_invalid_mode(self, file_ctx):
        with pytest.raises(ValueError, match="Invalid mode"):
            write_table(pd.DataFrame(), "sales", context=file_ctx, mode="merge")
