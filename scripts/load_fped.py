"""
Load the FPED equivalents of an FNDDS release.

Usage:
    fped-load <versionId> <sourceConnectionString>

The FNDDS import for the same release must have run first. Releases
3.0 (4) through 2013-2014 (64) have equivalents; any other id loads
nothing.
"""

import asyncio
import sys
from typing import List, Optional

from core.logging import setup_logging
from ingestion.runner import FpedImporter
from scripts.common import resolve_arguments, run_import


def main(argv: Optional[List[str]] = None) -> None:
    setup_logging()

    resolved = resolve_arguments(sys.argv[1:] if argv is None else argv)
    if resolved is None:
        return

    descriptor, conn_string = resolved
    asyncio.run(run_import(FpedImporter, descriptor, conn_string))


if __name__ == "__main__":
    main()
