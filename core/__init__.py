"""
Core utilities and configuration for the FNDDS/FPED loaders.

This package provides foundational components used throughout the loaders:

Modules:
    config: Application configuration and environment variable management
    database: Destination engine and session management
    exceptions: Custom exception hierarchy for error handling
    logging: Logging configuration and utilities
    versions: Catalog of supported FNDDS releases and FPED table bindings

Usage:
    from core.config import settings
    from core.database import get_db_session
    from core.exceptions import UnknownVersionError, SourceConnectionError
    from core.logging import setup_logging
    from core.versions import resolve

Example:
    # Initialize logging
    setup_logging()

    # Resolve a release and open a destination session
    version = resolve(16)
    async with get_db_session() as session:
        # Perform database operations
        pass
"""

from core.config import settings
from core.exceptions import (
    ArgumentParseError,
    DatabaseError,
    ETLException,
    ExtractionError,
    LoadError,
    LoaderFailure,
    LoaderOrderError,
    RecordMappingError,
    SourceConnectionError,
    TransformationError,
    UnknownVersionError,
)
from core.logging import setup_logging
from core.versions import VersionDescriptor, resolve

# core.database is left out: importing it creates the destination engine
__all__ = [
    "settings",
    "setup_logging",
    "resolve",
    "VersionDescriptor",
    # Exceptions
    "ETLException",
    "ArgumentParseError",
    "UnknownVersionError",
    "LoaderOrderError",
    "ExtractionError",
    "SourceConnectionError",
    "TransformationError",
    "RecordMappingError",
    "LoadError",
    "DatabaseError",
    "LoaderFailure",
]
