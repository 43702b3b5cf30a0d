"""
Pydantic schemas mapping FPED source rows to destination records
"""

from typing import Optional

from pydantic import AliasChoices, Field

from schemas.base import SourceRow


class FpedComponentsRow(SourceRow):
    """The 37 food pattern components; missing ones stay None"""

    f_total: Optional[float] = None
    f_citmlb: Optional[float] = None
    f_other: Optional[float] = None
    f_juice: Optional[float] = None
    v_total: Optional[float] = None
    v_drkgr: Optional[float] = None
    v_redor_total: Optional[float] = None
    v_redor_tomato: Optional[float] = None
    v_redor_other: Optional[float] = None
    v_starchy_total: Optional[float] = None
    v_starchy_potato: Optional[float] = None
    v_starchy_other: Optional[float] = None
    v_other: Optional[float] = None
    v_legumes: Optional[float] = None
    g_total: Optional[float] = None
    g_whole: Optional[float] = None
    g_refined: Optional[float] = None
    pf_total: Optional[float] = None
    pf_mps_total: Optional[float] = None
    pf_meat: Optional[float] = None
    pf_curedmeat: Optional[float] = None
    pf_organ: Optional[float] = None
    pf_poult: Optional[float] = None
    pf_seafd_hi: Optional[float] = None
    pf_seafd_low: Optional[float] = None
    pf_eggs: Optional[float] = None
    pf_soy: Optional[float] = None
    pf_nutsds: Optional[float] = None
    pf_legumes: Optional[float] = None
    d_total: Optional[float] = None
    d_milk: Optional[float] = None
    d_yogurt: Optional[float] = None
    d_cheese: Optional[float] = None
    oils: Optional[float] = None
    solid_fats: Optional[float] = None
    add_sugars: Optional[float] = None
    a_drinks: Optional[float] = None


class FpedEquivalentRow(FpedComponentsRow):
    food_code: int = Field(validation_alias=AliasChoices("foodcode", "food_code"))
    description: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("description", "food_description", "main_food_description"),
    )


class FpedModEquivalentRow(FpedEquivalentRow):
    mod_code: int = Field(validation_alias=AliasChoices("modcode", "mod_code", "modification_code"))
