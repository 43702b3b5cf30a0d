"""
Loaders for the FPED equivalents tables.

Each FPED release publishes one table named after its survey years
(FPED_0506, FPED_0708, ...). The importer resolves that name and passes
it in. Releases before 2013-2014 mix plain and modified foods in the
one table, told apart by MODCODE.
"""

from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ingestion.base import DataLoader
from ingestion.sources.base import RowSource
from models.fped import FPED_COMPONENTS, FpedEquivalent, FpedModEquivalent
from models.version import FnddsVersion
from schemas.fped import FpedEquivalentRow, FpedModEquivalentRow

_MOD_CODE_KEYS = ("modcode", "mod_code", "modification_code")


def is_modified(row: Dict[str, Any]) -> bool:
    """True when a row carries a non-zero modification code"""
    for key in _MOD_CODE_KEYS:
        value = row.get(key)
        if value is None or str(value).strip() == "":
            continue
        try:
            return float(value) != 0
        except (TypeError, ValueError):
            # Let the modification schema report it
            return True
    return False


class _EquivalentsLoader(DataLoader):
    source_columns = ("foodcode", "modcode", "description") + FPED_COMPONENTS

    def __init__(
        self,
        version: FnddsVersion,
        source: RowSource,
        db_session: AsyncSession,
        source_table: str,
        batch_size: Optional[int] = None
    ):
        super().__init__(version, source, db_session, batch_size)
        self.source_table = source_table


class EquivalentLoader(_EquivalentsLoader):
    model = FpedEquivalent
    row_schema = FpedEquivalentRow

    def accepts(self, row: Dict[str, Any]) -> bool:
        return not is_modified(row)


class ModEquivalentLoader(_EquivalentsLoader):
    model = FpedModEquivalent
    row_schema = FpedModEquivalentRow

    def accepts(self, row: Dict[str, Any]) -> bool:
        return is_modified(row)
