"""
Pydantic schemas mapping FNDDS source rows to destination records.

Field names match the lower-cased USDA column names, which the row
sources produce, so most fields need no alias.
"""

from typing import Optional

from schemas.base import SourceRow, DatedRow


class FoodPortionDescRow(DatedRow):
    portion_code: int
    portion_description: Optional[str] = None


class SubcodeDescRow(DatedRow):
    subcode: int
    subcode_description: Optional[str] = None


class MainFoodDescRow(DatedRow):
    food_code: int
    main_food_description: Optional[str] = None
    fortification_identifier: Optional[int] = None


class NutDescRow(SourceRow):
    nutrient_code: int
    nutrient_description: Optional[str] = None
    tagname: Optional[str] = None
    unit: Optional[str] = None
    decimals: Optional[int] = None


class FoodWeightsRow(DatedRow):
    food_code: int
    subcode: Optional[int] = None
    seq_num: Optional[int] = None
    portion_code: int
    portion_weight: Optional[float] = None
    change_type_to_weight: Optional[str] = None


class MoistNFatAdjustRow(DatedRow):
    food_code: int
    moisture_change: Optional[float] = None
    fat_change: Optional[float] = None
    type_of_fat: Optional[int] = None


class AddFoodDescRow(DatedRow):
    food_code: int
    seq_num: Optional[int] = None
    additional_food_description: Optional[str] = None


class FnddsSrLinksRow(DatedRow):
    food_code: int
    seq_num: Optional[int] = None
    sr_code: Optional[int] = None
    sr_description: Optional[str] = None
    amount: Optional[float] = None
    measure: Optional[str] = None
    portion_code: Optional[int] = None
    retention_code: Optional[int] = None
    flag: Optional[int] = None
    weight: Optional[float] = None
    change_type_to_sr_code: Optional[str] = None
    change_type_to_weight: Optional[str] = None
    change_type_to_retn_code: Optional[str] = None


class FnddsNutValRow(DatedRow):
    food_code: int
    nutrient_code: int
    nutrient_value: Optional[float] = None


class ModDescRow(DatedRow):
    modification_code: int
    modification_description: Optional[str] = None
    food_code: int


class ModNutValRow(DatedRow):
    modification_code: int
    nutrient_code: int
    nutrient_value: Optional[float] = None
