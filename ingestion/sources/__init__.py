"""
Tabular sources the loaders read from.
"""

from ingestion.sources.base import RowSource
from ingestion.sources.database_source import DatabaseRowSource
from ingestion.sources.flat_file_source import FlatFileRowSource


def open_row_source(conn_string: str) -> RowSource:
    """
    Pick a row source for a connection string.

    A SQLAlchemy URL ("scheme://...") selects the database source;
    anything else is taken as a directory of USDA text files.
    """
    if "://" in conn_string:
        return DatabaseRowSource(conn_string)
    return FlatFileRowSource(conn_string)


__all__ = [
    "RowSource",
    "DatabaseRowSource",
    "FlatFileRowSource",
    "open_row_source",
]
