"""
Abstract base class for tabular source databases
"""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Mapping, Optional, Sequence


class RowSource(ABC):
    """
    Abstract base class for all row sources.

    A source is opened once per import run and then queried table by
    table; several sequential queries share the one open connection.
    Use it as an async context manager so the connection is released
    on every exit path:

        async with open_row_source(conn_string) as source:
            async for row in source.query("MainFoodDesc"):
                ...

    Rows are dictionaries keyed by normalized column name (stripped,
    lower-cased, spaces replaced by underscores), so "Food code",
    "Food_code" and "FOOD_CODE" all read as "food_code".
    """

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Identifies the source in logs, without credentials"""
        pass

    @abstractmethod
    async def open(self) -> None:
        """
        Acquire the source connection.

        Raises:
            SourceConnectionError: If the source cannot be reached
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the source connection. Safe to call more than once."""
        pass

    @abstractmethod
    def query(
        self,
        table_name: str,
        columns: Optional[Sequence[str]] = None
    ) -> AsyncIterator[Dict[str, Any]]:
        """
        Stream every row of a source table.

        Args:
            table_name: Source table name
            columns: Column layout, for sources that carry no header

        Raises:
            SourceConnectionError: If the table is missing or cannot be read
        """
        pass

    async def __aenter__(self) -> "RowSource":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @staticmethod
    def normalize_key(key: Any) -> str:
        return str(key).strip().lower().replace(" ", "_")

    def normalize_row(self, row: Mapping[Any, Any]) -> Dict[str, Any]:
        return {self.normalize_key(k): v for k, v in row.items()}
