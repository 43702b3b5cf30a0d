"""
Custom exceptions for the FNDDS/FPED loaders with structured error context.

Every failure in an import run surfaces as one of these exceptions. Nothing
is retried: the first error aborts the run and is logged as fatal at the
process boundary. Each exception carries a context dictionary so the fatal
log line says which version, table, or row was involved.

Exception Hierarchy:
    ETLException (base)
    ├── ArgumentParseError
    ├── UnknownVersionError
    ├── LoaderOrderError
    ├── ExtractionError
    │   └── SourceConnectionError
    ├── TransformationError
    │   └── RecordMappingError
    └── LoadError
        ├── DatabaseError
        └── LoaderFailure
"""

from typing import Optional, Dict, Any
from datetime import datetime


class ETLException(Exception):
    """
    Base exception for all loader errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (version, table, etc.)
        original_exception: The original exception that was caught (if any)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.utcnow()

        # Add timestamp to context
        self.context["error_timestamp"] = self.timestamp.isoformat()

        # Chain original exception if provided
        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Run setup errors
# ============================================================================

class ArgumentParseError(ETLException):
    """
    Raised when the command-line arguments are missing or malformed.

    Context should include:
        - argv: The arguments that were received
    """
    pass


class UnknownVersionError(ETLException):
    """
    Raised when a version id is not in the catalog, or when an FPED import
    targets a version that has not been loaded into the destination yet.

    Context should include:
        - version_id: The requested id
    """
    pass


class LoaderOrderError(ETLException):
    """
    Raised when a loader is scheduled before a loader whose rows it references.

    Context should include:
        - table_name: The loader that was scheduled too early
        - missing: Tables that must be loaded first
    """
    pass


# ============================================================================
# Extraction Errors
# ============================================================================

class ExtractionError(ETLException):
    """Base exception for source read failures."""
    pass


class SourceConnectionError(ExtractionError):
    """
    Raised when the source database cannot be opened or a source table
    cannot be read.

    Context should include:
        - source: Connection string or directory (credentials stripped)
        - source_table: The table being read (if applicable)
    """
    pass


# ============================================================================
# Transformation Errors
# ============================================================================

class TransformationError(ETLException):
    """Base exception for row mapping failures."""
    pass


class RecordMappingError(TransformationError):
    """
    Raised when a source row cannot be mapped to a destination record.

    Context should include:
        - table_name: Destination table
        - row_index: Zero-based index of the row in the source stream
        - field_errors: Validation errors reported for the row
    """
    pass


# ============================================================================
# Load Errors
# ============================================================================

class LoadError(ETLException):
    """Base exception for persistence failures."""
    pass


class DatabaseError(LoadError):
    """
    Raised when a destination operation outside a loader fails.

    Context should include:
        - operation: Type of database operation (SELECT, DELETE, INSERT)
        - table_name: Name of the table
    """
    pass


class LoaderFailure(LoadError):
    """
    Raised when a loader cannot persist its records.

    Context should include:
        - table_name: Destination table
        - version_id: Version being loaded
        - records_pending: Records added to the session before the failure
    """
    pass
