"""
Import pipeline for FNDDS and FPED releases.

This package contains every component of an import run:

Modules:
    base: DataLoader contract and version purge helpers
    runner: FnddsImporter and FpedImporter orchestrators

Subpackages:
    sources: Row sources (SQLAlchemy database, USDA ASCII directory)
    loaders: One loader per destination table

Architecture:
    An import run follows a fixed sequence:

    1. Resolve - look up the release in core.versions
    2. Replace - drop any previous load of the release (FNDDS)
    3. Load - run each table loader in dependency order, one at a time

    Each loader streams its source table, maps rows through a pydantic
    schema, adds the records to the session, and commits.

Usage:
    from core.versions import resolve
    from ingestion.runner import FnddsImporter

Example:
    async with get_db_session() as session:
        result = await FnddsImporter(session).import_version(
            resolve(16), "sqlite+aiosqlite:///fndds_5.db"
        )

    print(f"Loaded {result['records_loaded']} records")

Error Handling:
    Loaders raise the exceptions in core.exceptions and nothing is
    retried. The first failure aborts the run.
"""

from ingestion.base import DataLoader
from ingestion.runner import FnddsImporter, FpedImporter
from ingestion.sources import open_row_source

__all__ = [
    "DataLoader",
    "FnddsImporter",
    "FpedImporter",
    "open_row_source",
]
