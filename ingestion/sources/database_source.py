"""
Row source over any database SQLAlchemy can reach asynchronously
"""

from typing import Any, AsyncIterator, Dict, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from core.exceptions import SourceConnectionError
from ingestion.sources.base import RowSource
import logging

logger = logging.getLogger(__name__)


class DatabaseRowSource(RowSource):
    """
    Read source tables through one SQLAlchemy AsyncConnection.

    Supports:
    - Any async dialect URL (sqlite+aiosqlite, postgresql+asyncpg, ...)
    - Server-side streaming, so large nutrient tables are never buffered
    - Table names that need quoting (mixed case, leading digits)

    The USDA Access (.mdb) releases cannot be read directly; no async
    dialect opens them. Export them to SQLite or to the ASCII files first.
    """

    def __init__(self, url: str):
        self.url = url
        self.engine: Optional[AsyncEngine] = None
        self.connection: Optional[AsyncConnection] = None

    @property
    def display_name(self) -> str:
        try:
            return make_url(self.url).render_as_string(hide_password=True)
        except ArgumentError:
            return "<invalid url>"

    async def open(self) -> None:
        logger.info(f"Opening source database {self.display_name}")
        try:
            self.engine = create_async_engine(self.url, poolclass=NullPool)
            self.connection = await self.engine.connect()
        except Exception as e:
            await self.close()
            raise SourceConnectionError(
                "Failed to open source database",
                context={"source": self.display_name},
                original_exception=e
            )

    async def close(self) -> None:
        if self.connection is not None:
            await self.connection.close()
            self.connection = None
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None

    async def query(
        self,
        table_name: str,
        columns: Optional[Sequence[str]] = None
    ) -> AsyncIterator[Dict[str, Any]]:
        if self.connection is None:
            raise SourceConnectionError(
                "Source database is not open",
                context={"source": self.display_name, "source_table": table_name}
            )

        quoted = self.connection.dialect.identifier_preparer.quote(table_name)
        stmt = text(f"SELECT * FROM {quoted}")
        logger.debug(f"Querying {table_name} from {self.display_name}")

        try:
            result = await self.connection.stream(stmt)
            async for row in result.mappings():
                yield self.normalize_row(row)
        except SQLAlchemyError as e:
            raise SourceConnectionError(
                "Failed to read source table",
                context={"source": self.display_name, "source_table": table_name},
                original_exception=e
            )
