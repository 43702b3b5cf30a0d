"""
FPED destination tables.

Food Pattern Equivalents express each FNDDS food as amounts of the 37
USDA Food Patterns components (cup, ounce, teaspoon or gram equivalents
per 100 g). Releases differ in which components they publish, so every
component is nullable.
"""

from sqlalchemy import Column, String, Integer, Float, ForeignKeyConstraint
from models.base import Base, VersionedMixin

FPED_COMPONENTS = (
    "f_total", "f_citmlb", "f_other", "f_juice",
    "v_total", "v_drkgr", "v_redor_total", "v_redor_tomato", "v_redor_other",
    "v_starchy_total", "v_starchy_potato", "v_starchy_other", "v_other", "v_legumes",
    "g_total", "g_whole", "g_refined",
    "pf_total", "pf_mps_total", "pf_meat", "pf_curedmeat", "pf_organ", "pf_poult",
    "pf_seafd_hi", "pf_seafd_low", "pf_eggs", "pf_soy", "pf_nutsds", "pf_legumes",
    "d_total", "d_milk", "d_yogurt", "d_cheese",
    "oils", "solid_fats", "add_sugars", "a_drinks",
)


class FpedComponentsMixin:
    f_total = Column(Float, nullable=True)
    f_citmlb = Column(Float, nullable=True)
    f_other = Column(Float, nullable=True)
    f_juice = Column(Float, nullable=True)
    v_total = Column(Float, nullable=True)
    v_drkgr = Column(Float, nullable=True)
    v_redor_total = Column(Float, nullable=True)
    v_redor_tomato = Column(Float, nullable=True)
    v_redor_other = Column(Float, nullable=True)
    v_starchy_total = Column(Float, nullable=True)
    v_starchy_potato = Column(Float, nullable=True)
    v_starchy_other = Column(Float, nullable=True)
    v_other = Column(Float, nullable=True)
    v_legumes = Column(Float, nullable=True)
    g_total = Column(Float, nullable=True)
    g_whole = Column(Float, nullable=True)
    g_refined = Column(Float, nullable=True)
    pf_total = Column(Float, nullable=True)
    pf_mps_total = Column(Float, nullable=True)
    pf_meat = Column(Float, nullable=True)
    pf_curedmeat = Column(Float, nullable=True)
    pf_organ = Column(Float, nullable=True)
    pf_poult = Column(Float, nullable=True)
    pf_seafd_hi = Column(Float, nullable=True)
    pf_seafd_low = Column(Float, nullable=True)
    pf_eggs = Column(Float, nullable=True)
    pf_soy = Column(Float, nullable=True)
    pf_nutsds = Column(Float, nullable=True)
    pf_legumes = Column(Float, nullable=True)
    d_total = Column(Float, nullable=True)
    d_milk = Column(Float, nullable=True)
    d_yogurt = Column(Float, nullable=True)
    d_cheese = Column(Float, nullable=True)
    oils = Column(Float, nullable=True)
    solid_fats = Column(Float, nullable=True)
    add_sugars = Column(Float, nullable=True)
    a_drinks = Column(Float, nullable=True)


class FpedEquivalent(VersionedMixin, FpedComponentsMixin, Base):
    """Equivalents for an unmodified food"""
    __tablename__ = "fped_equivalent"

    food_code = Column(Integer, nullable=False, index=True)
    description = Column(String(200), nullable=True)

    __table_args__ = (
        ForeignKeyConstraint(
            ["version_id", "food_code"],
            ["main_food_desc.version_id", "main_food_desc.food_code"],
        ),
    )


class FpedModEquivalent(VersionedMixin, FpedComponentsMixin, Base):
    """Equivalents for a food with a recipe modification applied"""
    __tablename__ = "fped_mod_equivalent"

    food_code = Column(Integer, nullable=False, index=True)
    mod_code = Column(Integer, nullable=False)
    description = Column(String(200), nullable=True)

    __table_args__ = (
        ForeignKeyConstraint(
            ["version_id", "mod_code"],
            ["mod_desc.version_id", "mod_desc.modification_code"],
        ),
    )
