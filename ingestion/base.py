"""
Abstract base class for per-table loaders, and version purge helpers
"""

from abc import ABC
from typing import Any, Dict, List, Optional, Sequence, Set, Type

import pydantic
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.exceptions import LoaderFailure, RecordMappingError
from ingestion.sources.base import RowSource
from models import Base, FnddsVersion
from schemas.base import SourceRow
import logging

logger = logging.getLogger(__name__)


def table_dependencies(model: Type[Base]) -> Set[str]:
    """Tables a model references through foreign keys, other than fndds_version"""
    referenced = {
        fk.target_fullname.split(".")[0]
        for fk in model.__table__.foreign_keys
    }
    referenced.discard(FnddsVersion.__tablename__)
    referenced.discard(model.__tablename__)
    return referenced


class DataLoader(ABC):
    """
    Abstract base class for all table loaders.

    A loader owns one (source table -> destination table) pairing.
    Subclasses declare it with four class attributes:

        model: Destination ORM model
        row_schema: Pydantic schema mapping one source row to model attributes
        source_table: Source table name
        source_columns: Column layout for headerless source files

    Responsibilities:
    - Stream the source table and map every accepted row
    - Add the records to the session in chunks and commit once
    - Report the number of records written
    - Clear the table for its version on request

    Errors are not caught beyond adding context: a failed loader aborts
    the run.
    """

    model: Type[Base]
    row_schema: Type[SourceRow]
    source_table: str
    source_columns: Sequence[str] = ()

    def __init__(
        self,
        version: FnddsVersion,
        source: RowSource,
        db_session: AsyncSession,
        batch_size: Optional[int] = None
    ):
        self.version = version
        self.source = source
        self.db = db_session
        self.batch_size = batch_size or settings.ETL_BATCH_SIZE

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    @property
    def dependencies(self) -> Set[str]:
        """Destination tables this loader's rows reference"""
        return table_dependencies(self.model)

    def accepts(self, row: Dict[str, Any]) -> bool:
        """Filter applied to source rows before mapping"""
        return True

    def map_row(self, row: Dict[str, Any], row_index: int) -> Base:
        """Convert one source row into a destination record"""
        try:
            parsed = self.row_schema.model_validate(row)
        except pydantic.ValidationError as e:
            raise RecordMappingError(
                "Failed to map source row",
                context={
                    "table_name": self.table_name,
                    "source_table": self.source_table,
                    "row_index": row_index,
                    "field_errors": e.errors(include_url=False, include_input=False),
                },
                original_exception=e
            )
        return self.model(version_id=self.version.id, **parsed.model_dump())

    async def clear(self) -> int:
        """Delete this table's rows for the current version"""
        try:
            result = await self.db.execute(
                delete(self.model).where(self.model.version_id == self.version.id)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._failure("Failed to clear table", e)

        cleared = result.rowcount or 0
        if cleared:
            logger.info(f"Cleared {cleared} existing rows from {self.table_name}")
        return cleared

    async def load(self) -> int:
        """
        Load the whole source table.

        Returns:
            Number of records added (0 for an empty source table)
        """
        logger.info(f"Loading {self.table_name} from {self.source_table}")

        loaded = 0
        row_index = 0
        pending: List[Base] = []

        async for row in self.source.query(self.source_table, self.source_columns):
            if self.accepts(row):
                pending.append(self.map_row(row, row_index))
            row_index += 1

            if len(pending) >= self.batch_size:
                loaded += await self._flush(pending, loaded)
                pending = []

        if pending:
            loaded += await self._flush(pending, loaded)

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._failure("Failed to commit records", e, records_pending=loaded)

        logger.info(f"Loaded {loaded} records into {self.table_name}")
        return loaded

    async def _flush(self, records: List[Base], loaded: int) -> int:
        try:
            self.db.add_all(records)
            await self.db.flush()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise self._failure("Failed to add records", e, records_pending=loaded + len(records))
        return len(records)

    def _failure(self, message: str, error: Exception, **context) -> LoaderFailure:
        return LoaderFailure(
            message,
            context={
                "table_name": self.table_name,
                "version_id": self.version.id,
                **context,
            },
            original_exception=error
        )


def _versioned_tables():
    """Tables holding per-version rows, referencing tables first."""
    return [
        table for table in reversed(Base.metadata.sorted_tables)
        if "version_id" in table.c
    ]


async def purge_version(db_session: AsyncSession, version_id: int) -> int:
    """
    Delete every entity row that belongs to one release.

    Tables are visited in reverse foreign-key order. The fndds_version
    row itself is left for the caller. Does not commit.

    Returns:
        Total number of rows deleted
    """
    deleted = 0
    for table in _versioned_tables():
        result = await db_session.execute(
            delete(table).where(table.c.version_id == version_id)
        )
        if result.rowcount:
            logger.debug(f"Purged {result.rowcount} rows from {table.name}")
            deleted += result.rowcount
    return deleted


async def purge_all(db_session: AsyncSession) -> int:
    """Delete every entity row and every version row. Does not commit."""
    deleted = 0
    for table in reversed(Base.metadata.sorted_tables):
        result = await db_session.execute(delete(table))
        deleted += result.rowcount or 0
    return deleted
