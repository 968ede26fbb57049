"""A unified, simplified interface for SQLite query results"""
from typing import Any, Generator, Iterator, Optional
from dataclasses import dataclass
import pandas as pd


@dataclass
class QueryResult:
    """A unified, simplified interface for SQLite query results"""
    _cursor: Any
    sql: str = ""

    @property
    def rowcount(self) -> int:
        """The number of rows affected, -1 for SELECT and DDL statements"""
        return self._cursor.rowcount if self._cursor.rowcount is not None else -1

    @property
    def lastrowid(self) -> Optional[int]:
        """Row id of the last row inserted through this cursor"""
        return self._cursor.lastrowid

    @property
    def description(self) -> Optional[list[tuple]]:
        """A description of the result columns"""
        return self._cursor.description

    @property
    def columns(self) -> list[str]:
        """Names of the result columns, empty when the statement returns no rows"""
        if not self._cursor.description:
            return []
        return [desc[0] for desc in self._cursor.description]

    def fetch_one(self) -> Optional[tuple[Any, ...]]:
        """Fetch the next row of a query result set"""
        return self._cursor.fetchone()

    def fetch_all(self) -> list[tuple[Any, ...]]:
        """Fetch all remaining rows of a query result set"""
        result = self._cursor.fetchall()
        return result if result else []

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        """Iterate over the remaining rows"""
        return iter(self._cursor)

    def fetch_batches(
        self,
        batch_size: int = 10000,
        lowercase_columns: bool = False
    ) -> Generator[pd.DataFrame, None, None]:
        """Fetch results in DataFrame batches of at most batch_size rows"""
        columns = self._column_names(lowercase_columns)
        while True:
            rows = self._cursor.fetchmany(batch_size)
            if not rows:
                break
            yield pd.DataFrame(rows, columns=columns)

    def to_df(self, lowercase_columns: bool = False) -> pd.DataFrame:
        """Fetch all remaining results as a single DataFrame with optional column casing"""
        if not self._cursor.description:
            return pd.DataFrame()
        return pd.DataFrame(self.fetch_all(), columns=self._column_names(lowercase_columns))

    def close(self) -> None:
        """Close the underlying cursor"""
        self._cursor.close()

    def _column_names(self, lowercase: bool) -> list[str]:
        if lowercase:
            return [name.lower() for name in self.columns]
        return self.columns

    def __repr__(self) -> str:
        """String representation"""
        return (
            f"QueryResult(sql='{self.sql}', "
            f"rowcount={self.rowcount})"
        )
