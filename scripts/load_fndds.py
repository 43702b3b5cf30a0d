"""
Load one FNDDS release into the destination database.

Usage:
    fndds-load <versionId> <sourceConnectionString>

    versionId:
        1   = FNDDS 1.0 (2001-2002)
        2   = FNDDS 2.0 (2003-2004)
        4   = FNDDS 3.0 (2005-2006)
        8   = FNDDS 4.1 (2007-2008)
        16  = FNDDS 5.0 (2009-2010)
        32  = FNDDS 2011-2012
        64  = FNDDS 2013-2014
        128 = FNDDS 2015-2016
    sourceConnectionString:
        SQLAlchemy async URL of the source database, or a directory
        holding the USDA ASCII files
"""

import asyncio
import sys
from typing import List, Optional

from core.logging import setup_logging
from ingestion.runner import FnddsImporter
from scripts.common import resolve_arguments, run_import


def main(argv: Optional[List[str]] = None) -> None:
    setup_logging()

    resolved = resolve_arguments(sys.argv[1:] if argv is None else argv)
    if resolved is None:
        return

    descriptor, conn_string = resolved
    asyncio.run(run_import(FnddsImporter, descriptor, conn_string))


if __name__ == "__main__":
    main()
