"""
Catalog of supported FNDDS dataset releases.

Version ids are bit flags, one per biennial USDA release. The catalog is
static; new releases are added here.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from core.exceptions import UnknownVersionError


class VersionDescriptor(BaseModel):
    """An FNDDS release and the survey years it covers"""
    model_config = ConfigDict(frozen=True)

    id: int
    begin_year: int
    end_year: int
    major: int
    minor: int

    @property
    def label(self) -> str:
        return f"FNDDS {self.begin_year}-{self.end_year} ({self.major}.{self.minor})"


def _release(version_id: int, begin_year: int, major: int, minor: int = 0) -> VersionDescriptor:
    return VersionDescriptor(
        id=version_id,
        begin_year=begin_year,
        end_year=begin_year + 1,
        major=major,
        minor=minor
    )


VERSIONS: Dict[int, VersionDescriptor] = {
    descriptor.id: descriptor
    for descriptor in (
        _release(1, 2001, 1),
        _release(2, 2003, 2),
        _release(4, 2005, 3),
        _release(8, 2007, 4, 1),
        _release(16, 2009, 5),
        _release(32, 2011, 6),
        _release(64, 2013, 7),
        _release(128, 2015, 8),
    )
}

# FPED equivalents are published in one table per release, named by survey years
FPED_TABLE_SUFFIXES: Dict[int, str] = {
    4: "0506",
    8: "0708",
    16: "0910",
    32: "1112",
    64: "1314",
}

# Releases from this id on dropped the modification-equivalents rows
MOD_EQUIVALENTS_CUTOFF = 64


def resolve(version_id: int) -> VersionDescriptor:
    """
    Look up a release by its exact id.

    Raises:
        UnknownVersionError: If the id is not a supported release
    """
    try:
        return VERSIONS[version_id]
    except KeyError:
        raise UnknownVersionError(
            f"Unknown FNDDS version: {version_id}",
            context={"version_id": version_id, "known": sorted(VERSIONS)}
        )


def is_equivalents_eligible(version_id: int) -> bool:
    return 2 < version_id < 128


def has_mod_equivalents(version_id: int) -> bool:
    return version_id < MOD_EQUIVALENTS_CUTOFF


def fped_source_table(version_id: int) -> Optional[str]:
    """Name of the FPED source table for a release, or None if it has none."""
    if not is_equivalents_eligible(version_id):
        return None
    suffix = FPED_TABLE_SUFFIXES.get(version_id)
    if suffix is None:
        return None
    return f"FPED_{suffix}"
