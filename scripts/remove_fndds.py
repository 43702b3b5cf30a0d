"""
Remove every loaded FNDDS release, with its FNDDS and FPED rows
"""

import asyncio
import logging

from core.database import engine, get_db_session
from core.logging import setup_logging
from ingestion.runner import FnddsImporter

logger = logging.getLogger(__name__)


async def remove_data() -> int:
    try:
        async with get_db_session() as session:
            return await FnddsImporter(session).remove_all()
    finally:
        await engine.dispose()


def main() -> None:
    setup_logging()
    deleted = asyncio.run(remove_data())
    logger.info(f"Removed {deleted} rows")


if __name__ == "__main__":
    main()
