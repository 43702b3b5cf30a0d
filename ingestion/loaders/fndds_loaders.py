"""
Loaders for the eleven FNDDS tables.

Source table names do not change between releases. source_columns
gives the field order of the headerless USDA text files.
"""

from ingestion.base import DataLoader
from models.fndds import (
    FoodPortionDesc, SubcodeDesc, MainFoodDesc, NutDesc, FoodWeights,
    MoistNFatAdjust, AddFoodDesc, FnddsSrLinks, FnddsNutVal, ModDesc, ModNutVal
)
from schemas.fndds import (
    FoodPortionDescRow, SubcodeDescRow, MainFoodDescRow, NutDescRow, FoodWeightsRow,
    MoistNFatAdjustRow, AddFoodDescRow, FnddsSrLinksRow, FnddsNutValRow, ModDescRow,
    ModNutValRow
)


class FoodPortionDescLoader(DataLoader):
    model = FoodPortionDesc
    row_schema = FoodPortionDescRow
    source_table = "FoodPortionDesc"
    source_columns = ("portion_code", "start_date", "end_date", "portion_description")


class SubcodeDescLoader(DataLoader):
    model = SubcodeDesc
    row_schema = SubcodeDescRow
    source_table = "SubcodeDesc"
    source_columns = ("subcode", "start_date", "end_date", "subcode_description")


class MainFoodDescLoader(DataLoader):
    model = MainFoodDesc
    row_schema = MainFoodDescRow
    source_table = "MainFoodDesc"
    source_columns = (
        "food_code", "start_date", "end_date", "main_food_description",
        "fortification_identifier",
    )


class NutDescLoader(DataLoader):
    model = NutDesc
    row_schema = NutDescRow
    source_table = "NutDesc"
    source_columns = ("nutrient_code", "nutrient_description", "tagname", "unit", "decimals")


class FoodWeightsLoader(DataLoader):
    model = FoodWeights
    row_schema = FoodWeightsRow
    source_table = "FoodWeights"
    source_columns = (
        "food_code", "subcode", "seq_num", "portion_code", "start_date", "end_date",
        "portion_weight", "change_type_to_weight",
    )


class MoistNFatAdjustLoader(DataLoader):
    model = MoistNFatAdjust
    row_schema = MoistNFatAdjustRow
    source_table = "MoistNFatAdjust"
    source_columns = (
        "food_code", "start_date", "end_date", "moisture_change", "fat_change", "type_of_fat",
    )


class AddFoodDescLoader(DataLoader):
    model = AddFoodDesc
    row_schema = AddFoodDescRow
    source_table = "AddFoodDesc"
    source_columns = (
        "food_code", "seq_num", "start_date", "end_date", "additional_food_description",
    )


class FnddsSrLinksLoader(DataLoader):
    model = FnddsSrLinks
    row_schema = FnddsSrLinksRow
    source_table = "FNDDSSRLinks"
    source_columns = (
        "food_code", "start_date", "end_date", "seq_num", "sr_code", "sr_description",
        "amount", "measure", "portion_code", "retention_code", "flag", "weight",
        "change_type_to_sr_code", "change_type_to_weight", "change_type_to_retn_code",
    )


class FnddsNutValLoader(DataLoader):
    model = FnddsNutVal
    row_schema = FnddsNutValRow
    source_table = "FNDDSNutVal"
    source_columns = ("food_code", "nutrient_code", "start_date", "end_date", "nutrient_value")


class ModDescLoader(DataLoader):
    model = ModDesc
    row_schema = ModDescRow
    source_table = "ModDesc"
    source_columns = (
        "modification_code", "start_date", "end_date", "modification_description", "food_code",
    )


class ModNutValLoader(DataLoader):
    model = ModNutVal
    row_schema = ModNutValRow
    source_table = "ModNutVal"
    source_columns = (
        "modification_code", "nutrient_code", "start_date", "end_date", "nutrient_value",
    )


# Referenced tables come before the tables that reference them
FNDDS_LOADERS = (
    FoodPortionDescLoader,
    SubcodeDescLoader,
    MainFoodDescLoader,
    NutDescLoader,
    FoodWeightsLoader,
    MoistNFatAdjustLoader,
    AddFoodDescLoader,
    FnddsSrLinksLoader,
    FnddsNutValLoader,
    ModDescLoader,
    ModNutValLoader,
)
