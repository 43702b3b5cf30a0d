"""
Shared command-line handling for the import scripts
"""

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from core.database import engine, get_db_session
from core.exceptions import ArgumentParseError, ETLException, UnknownVersionError
from core.versions import VersionDescriptor, resolve

logger = logging.getLogger(__name__)

USAGE = "<versionId:int> <sourceConnectionString>"


def parse_arguments(argv: Sequence[str]) -> Tuple[int, str]:
    """
    Read the version id and source connection string.

    Raises:
        ArgumentParseError: If either argument is missing or the id is not an integer
    """
    if len(argv) < 2:
        raise ArgumentParseError(
            f"Missing command-line arguments. Usage: {USAGE}",
            context={"argc": len(argv)}
        )

    try:
        version_id = int(argv[0])
    except ValueError as e:
        raise ArgumentParseError(
            "An error occurred parsing the command-line arguments",
            context={"version_id": argv[0]},
            original_exception=e
        )

    return version_id, argv[1]


def resolve_arguments(argv: Sequence[str]) -> Optional[Tuple[VersionDescriptor, str]]:
    """
    Parse arguments and resolve the release, logging fatal errors.

    Returns:
        (descriptor, connection string), or None when the run must stop
    """
    try:
        version_id, conn_string = parse_arguments(argv)
        logger.debug(f"Version ID: {version_id}")
        descriptor = resolve(version_id)
    except ArgumentParseError as e:
        logger.critical(e.message, extra={"error_context": e.to_dict()})
        return None
    except UnknownVersionError as e:
        logger.critical(f"Invalid FNDDS version: {e.context.get('version_id')}")
        return None

    return descriptor, conn_string


async def run_import(importer_class, descriptor: VersionDescriptor, conn_string: str) -> Dict[str, Any]:
    """Run one importer inside a destination session and log the table counts"""
    try:
        async with get_db_session() as session:
            result = await importer_class(session).import_version(descriptor, conn_string)

        for table_name, records_loaded in result["tables"]:
            logger.info(f"Table: {table_name}, Records: {records_loaded}")
        return result

    except ETLException as e:
        logger.critical(f"Import failed: {e}", extra={"error_context": e.to_dict()})
        raise
    except Exception:
        logger.critical("Unexpected error during import", exc_info=True)
        raise
    finally:
        await engine.dispose()
