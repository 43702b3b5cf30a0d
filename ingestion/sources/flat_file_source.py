"""
Row source over the USDA ASCII distribution of FNDDS and FPED
"""

import pandas as pd
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Optional, Sequence

from core.config import settings
from core.exceptions import SourceConnectionError
from ingestion.sources.base import RowSource
import logging

logger = logging.getLogger(__name__)


class FlatFileRowSource(RowSource):
    """
    Read source tables from a directory of delimited text files.

    Supports:
    - <table>.csv: comma separated with a header row (re-exported tables)
    - <table>.txt: the USDA layout, caret separated, tilde quoted, no header
    - Case-insensitive file names

    Every value is read as text; the row schemas do the type conversion.
    """

    def __init__(
        self,
        directory: str,
        delimiter: Optional[str] = None,
        quotechar: Optional[str] = None,
        encoding: Optional[str] = None
    ):
        self.directory = Path(directory)
        self.delimiter = delimiter or settings.FLAT_FILE_DELIMITER
        self.quotechar = quotechar or settings.FLAT_FILE_QUOTECHAR
        self.encoding = encoding or settings.FLAT_FILE_ENCODING
        self._files: Dict[str, Path] = {}

    @property
    def display_name(self) -> str:
        return str(self.directory)

    async def open(self) -> None:
        if not self.directory.is_dir():
            raise SourceConnectionError(
                "Source directory not found",
                context={"source": self.display_name}
            )

        self._files = {
            path.name.lower(): path
            for path in self.directory.iterdir()
            if path.is_file()
        }
        logger.info(f"Opened {self.display_name} ({len(self._files)} files)")

    async def close(self) -> None:
        self._files = {}

    def _find(self, table_name: str) -> Optional[Path]:
        for extension in (".csv", ".txt"):
            path = self._files.get(f"{table_name}{extension}".lower())
            if path is not None:
                return path
        return None

    def _read(self, path: Path, columns: Optional[Sequence[str]]) -> pd.DataFrame:
        if path.suffix.lower() == ".csv":
            return pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                encoding=self.encoding
            )

        if not columns:
            raise ValueError("headerless file needs a column layout")

        df = pd.read_csv(
            path,
            sep=self.delimiter,
            quotechar=self.quotechar,
            header=None,
            dtype=str,
            keep_default_na=False,
            encoding=self.encoding
        )

        # USDA lines end with a delimiter, which reads as one empty extra field
        width = len(columns)
        if df.shape[1] > width:
            extra = df.iloc[:, width:]
            if df.shape[1] > width + 1 or (extra.fillna("") != "").any(axis=None):
                raise ValueError(
                    f"{path.name} has {df.shape[1]} fields per line, layout has {width}"
                )
            df = df.iloc[:, :width]

        df.columns = list(columns)[:df.shape[1]]
        return df

    async def query(
        self,
        table_name: str,
        columns: Optional[Sequence[str]] = None
    ) -> AsyncIterator[Dict[str, Any]]:
        path = self._find(table_name)
        if path is None:
            raise SourceConnectionError(
                "Source table not found",
                context={"source": self.display_name, "source_table": table_name}
            )

        logger.debug(f"Reading {table_name} from {path}")

        try:
            df = self._read(path, columns)
        except pd.errors.EmptyDataError:
            df = pd.DataFrame(columns=list(columns or []))
        except (OSError, ValueError) as e:
            raise SourceConnectionError(
                "Failed to read source table",
                context={"source": self.display_name, "source_table": table_name},
                original_exception=e
            )

        for record in df.to_dict(orient="records"):
            yield self.normalize_row(record)
