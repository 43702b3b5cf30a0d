# ============================================================================
# File: ingestion/runner.py
# Description: Import orchestrators for FNDDS and FPED releases
# ============================================================================
"""
Importers - resolve a release, sequence its table loaders, report counts.

This module provides:
- Replace-on-reload of the FNDDS version record and its entity rows
- Version-gated loader participation for FPED
- Dependency-order checking before any work is done
- One source connection and one destination session per run

Loaders run one after another. Later tables reference rows inserted by
earlier ones, and the source connection is not shareable. The first
error aborts the run; whatever was already committed stays committed.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from core.exceptions import DatabaseError, LoaderOrderError, UnknownVersionError
from core.versions import VersionDescriptor, fped_source_table, has_mod_equivalents
from ingestion.base import DataLoader, purge_all, purge_version, table_dependencies
from ingestion.loaders.fndds_loaders import FNDDS_LOADERS
from ingestion.loaders.fped_loaders import EquivalentLoader, ModEquivalentLoader
from ingestion.sources import RowSource, open_row_source
from models.version import FnddsVersion

logger = logging.getLogger(__name__)

TableReport = Tuple[str, int]


def check_loader_order(loaders: Iterable[Any]) -> None:
    """
    Verify every loader runs after the loaders whose tables it references.

    Accepts loader classes or instances. Only dependencies scheduled in
    the same run are checked; tables loaded by an earlier run (FNDDS
    tables during an FPED import) are assumed present.

    Raises:
        LoaderOrderError: If a loader is scheduled before a dependency
    """
    loaders = list(loaders)
    scheduled = {loader.model.__tablename__ for loader in loaders}
    loaded = set()

    for loader in loaders:
        table_name = loader.model.__tablename__
        missing = (table_dependencies(loader.model) & scheduled) - loaded
        if missing:
            raise LoaderOrderError(
                f"{table_name} is scheduled before the tables it references",
                context={"table_name": table_name, "missing": sorted(missing)}
            )
        loaded.add(table_name)


async def run_loaders(loaders: Sequence[DataLoader], clear_first: bool = False) -> List[TableReport]:
    """Run loaders sequentially and collect (table name, records loaded)."""
    reports = []
    for loader in loaders:
        if clear_first:
            await loader.clear()

        records_loaded = await loader.load()
        logger.debug(f"Table: {loader.table_name}, Records: {records_loaded}")
        reports.append((loader.table_name, records_loaded))
    return reports


def _result(version_id: int, tables: List[TableReport], **extra) -> Dict[str, Any]:
    return {
        "status": "success",
        "version_id": version_id,
        "tables": tables,
        "records_loaded": sum(count for _, count in tables),
        **extra,
    }


class FnddsImporter:
    """
    FNDDS release importer

    Responsibilities:
    - Replace any previous load of the release (version row and entity rows)
    - Open the source once and run the eleven table loaders in order
    - Report the records loaded per table
    """

    def __init__(
        self,
        db_session: AsyncSession,
        loader_classes: Sequence[Type[DataLoader]] = FNDDS_LOADERS,
        source_factory: Callable[[str], RowSource] = open_row_source
    ):
        self.db = db_session
        self.loader_classes = list(loader_classes)
        self.source_factory = source_factory

    async def import_version(self, descriptor: VersionDescriptor, conn_string: str) -> Dict[str, Any]:
        """
        Import one FNDDS release.

        Args:
            descriptor: Resolved release from the version catalog
            conn_string: Source database URL or ASCII distribution directory

        Returns:
            Dictionary with run statistics:
            - status: "success"
            - version_id: The release imported
            - tables: [(table_name, records_loaded), ...] in load order
            - records_loaded: Total across tables

        Raises:
            LoaderOrderError: If the loader list violates table dependencies
            SourceConnectionError: If the source cannot be opened or read
            RecordMappingError: If a source row cannot be mapped
            LoaderFailure / DatabaseError: If the destination rejects a write
        """
        check_loader_order(self.loader_classes)

        logger.info(f"Starting FNDDS import for {descriptor.label}")

        version = await self.replace_version(descriptor)

        async with self.source_factory(conn_string) as source:
            loaders = [cls(version, source, self.db) for cls in self.loader_classes]
            tables = await run_loaders(loaders)

        result = _result(version.id, tables)
        logger.info(
            f"FNDDS import completed for version {version.id}: "
            f"{len(tables)} tables, {result['records_loaded']} records"
        )
        return result

    async def replace_version(self, descriptor: VersionDescriptor) -> FnddsVersion:
        """Drop any previous load of the release and insert a fresh version row"""
        try:
            existing = await self.db.get(FnddsVersion, descriptor.id)
            if existing is not None:
                purged = await purge_version(self.db, descriptor.id)
                await self.db.delete(existing)
                await self.db.commit()
                # Purged rows may still be in the identity map
                self.db.expunge_all()
                logger.info(f"Removed previous load of version {descriptor.id} ({purged} rows)")

            version = FnddsVersion(
                id=descriptor.id,
                begin_year=descriptor.begin_year,
                end_year=descriptor.end_year,
                major=descriptor.major,
                minor=descriptor.minor,
                created=datetime.utcnow()
            )
            self.db.add(version)
            await self.db.commit()

        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(
                "Failed to replace version record",
                context={
                    "version_id": descriptor.id,
                    "operation": "DELETE/INSERT",
                    "table_name": FnddsVersion.__tablename__
                },
                original_exception=e
            )

        return version

    async def remove_all(self) -> int:
        """Remove every loaded release and its rows"""
        try:
            deleted = await purge_all(self.db)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(
                "Failed to remove loaded versions",
                context={"operation": "DELETE"},
                original_exception=e
            )

        logger.info(f"Removed all loaded versions ({deleted} rows)")
        return deleted


class FpedImporter:
    """
    FPED equivalents importer

    Responsibilities:
    - Require the matching FNDDS release to be loaded already
    - Bind the release to its FPED source table
    - Run the equivalents loader, and the modification-equivalents
      loader for releases that still publish it
    """

    def __init__(
        self,
        db_session: AsyncSession,
        source_factory: Callable[[str], RowSource] = open_row_source
    ):
        self.db = db_session
        self.source_factory = source_factory

    @staticmethod
    def loader_classes(version_id: int) -> List[Type[DataLoader]]:
        """Loaders taking part in an import of the given release"""
        if fped_source_table(version_id) is None:
            return []

        loader_classes: List[Type[DataLoader]] = [EquivalentLoader]
        if has_mod_equivalents(version_id):
            loader_classes.append(ModEquivalentLoader)
        return loader_classes

    async def import_version(self, descriptor: VersionDescriptor, conn_string: str) -> Dict[str, Any]:
        """
        Import the FPED equivalents of one release.

        Returns:
            Same statistics as FnddsImporter.import_version, plus
            source_table (None when the release has no equivalents)

        Raises:
            UnknownVersionError: If the FNDDS release has not been loaded
        """
        version = await self._find_version(descriptor.id)

        source_table: Optional[str] = fped_source_table(version.id)
        loader_classes = self.loader_classes(version.id)

        if not loader_classes:
            logger.info(f"Version {version.id} has no FPED equivalents; nothing to load")
            return _result(version.id, [], source_table=None)

        check_loader_order(loader_classes)

        logger.info(f"Starting FPED import for version {version.id} from {source_table}")

        async with self.source_factory(conn_string) as source:
            loaders = [cls(version, source, self.db, source_table) for cls in loader_classes]
            tables = await run_loaders(loaders, clear_first=True)

        result = _result(version.id, tables, source_table=source_table)
        logger.info(
            f"FPED import completed for version {version.id}: "
            f"{result['records_loaded']} records"
        )
        return result

    async def _find_version(self, version_id: int) -> FnddsVersion:
        try:
            version = await self.db.get(FnddsVersion, version_id)
        except SQLAlchemyError as e:
            raise DatabaseError(
                "Failed to look up version record",
                context={
                    "version_id": version_id,
                    "operation": "SELECT",
                    "table_name": FnddsVersion.__tablename__
                },
                original_exception=e
            )

        if version is None:
            raise UnknownVersionError(
                "FNDDS version has not been loaded; run the FNDDS import first",
                context={"version_id": version_id}
            )
        return version
