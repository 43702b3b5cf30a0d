"""
SQLAlchemy ORM models for the destination tables.

This package defines the destination schema using SQLAlchemy ORM models:

Models:
    base: Base declarative class and the per-version column mixin
    version: FnddsVersion, one row per loaded release
    fndds: The eleven FNDDS tables
    fped: The two FPED equivalents tables

Database Schema:
    Every entity table carries version_id referencing fndds_version.id.
    Importing this package registers all tables on Base.metadata, which
    the loaders rely on to purge a release in foreign-key order.

Usage:
    from models import FnddsVersion, MainFoodDesc, FpedEquivalent
    from models.base import Base

Example:
    version = FnddsVersion(id=16, begin_year=2009, end_year=2010, major=5, minor=0)
    session.add(version)
    await session.commit()
"""

from models.base import Base, VersionedMixin
from models.version import FnddsVersion
from models.fndds import (
    FoodPortionDesc,
    SubcodeDesc,
    MainFoodDesc,
    NutDesc,
    FoodWeights,
    MoistNFatAdjust,
    AddFoodDesc,
    FnddsSrLinks,
    FnddsNutVal,
    ModDesc,
    ModNutVal,
)
from models.fped import FPED_COMPONENTS, FpedEquivalent, FpedModEquivalent

__all__ = [
    "Base",
    "VersionedMixin",
    "FnddsVersion",
    "FoodPortionDesc",
    "SubcodeDesc",
    "MainFoodDesc",
    "NutDesc",
    "FoodWeights",
    "MoistNFatAdjust",
    "AddFoodDesc",
    "FnddsSrLinks",
    "FnddsNutVal",
    "ModDesc",
    "ModNutVal",
    "FPED_COMPONENTS",
    "FpedEquivalent",
    "FpedModEquivalent",
]
