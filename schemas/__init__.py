"""
Pydantic schemas for source rows.

Each schema validates one row read from a USDA source table and yields
the attributes of the matching destination model:

Modules:
    base: Shared row handling (blank values, dates, schema drift)
    fndds: One schema per FNDDS table
    fped: Equivalents and modification-equivalents rows

Usage:
    from schemas.fndds import MainFoodDescRow

    row = MainFoodDescRow.model_validate({"food_code": "11111000", ...})
    record = MainFoodDesc(version_id=16, **row.model_dump())
"""

from schemas.base import DatedRow, SourceRow
from schemas.fndds import (
    AddFoodDescRow,
    FnddsNutValRow,
    FnddsSrLinksRow,
    FoodPortionDescRow,
    FoodWeightsRow,
    MainFoodDescRow,
    ModDescRow,
    ModNutValRow,
    MoistNFatAdjustRow,
    NutDescRow,
    SubcodeDescRow,
)
from schemas.fped import FpedEquivalentRow, FpedModEquivalentRow

__all__ = [
    "SourceRow",
    "DatedRow",
    "FoodPortionDescRow",
    "SubcodeDescRow",
    "MainFoodDescRow",
    "NutDescRow",
    "FoodWeightsRow",
    "MoistNFatAdjustRow",
    "AddFoodDescRow",
    "FnddsSrLinksRow",
    "FnddsNutValRow",
    "ModDescRow",
    "ModNutValRow",
    "FpedEquivalentRow",
    "FpedModEquivalentRow",
]
