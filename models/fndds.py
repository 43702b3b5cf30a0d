"""
FNDDS destination tables.

Column names follow the USDA FNDDS table documentation, lower-cased.
Codes are unique within a release, so references between tables are
composite foreign keys on (version_id, code). Those keys also define
the order the tables must be loaded in.
"""

from sqlalchemy import (
    Column, String, Integer, Float, Date, Text,
    ForeignKeyConstraint, UniqueConstraint, Index
)
from models.base import Base, VersionedMixin


def _food_ref():
    return ForeignKeyConstraint(
        ["version_id", "food_code"],
        ["main_food_desc.version_id", "main_food_desc.food_code"],
    )


def _nutrient_ref():
    return ForeignKeyConstraint(
        ["version_id", "nutrient_code"],
        ["nut_desc.version_id", "nut_desc.nutrient_code"],
    )


class FoodPortionDesc(VersionedMixin, Base):
    __tablename__ = "food_portion_desc"

    portion_code = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    portion_description = Column(String(120), nullable=True)

    __table_args__ = (
        UniqueConstraint("version_id", "portion_code"),
    )


class SubcodeDesc(VersionedMixin, Base):
    __tablename__ = "subcode_desc"

    subcode = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    subcode_description = Column(String(120), nullable=True)

    __table_args__ = (
        UniqueConstraint("version_id", "subcode"),
    )


class MainFoodDesc(VersionedMixin, Base):
    """Food codes and their descriptions; nearly every other table references it"""
    __tablename__ = "main_food_desc"

    food_code = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    main_food_description = Column(String(200), nullable=True)
    fortification_identifier = Column(Integer, nullable=True)

    __table_args__ = (
        UniqueConstraint("version_id", "food_code"),
    )


class NutDesc(VersionedMixin, Base):
    __tablename__ = "nut_desc"

    nutrient_code = Column(Integer, nullable=False)
    nutrient_description = Column(String(60), nullable=True)
    tagname = Column(String(20), nullable=True)
    unit = Column(String(10), nullable=True)
    decimals = Column(Integer, nullable=True)

    __table_args__ = (
        UniqueConstraint("version_id", "nutrient_code"),
    )


class FoodWeights(VersionedMixin, Base):
    __tablename__ = "food_weights"

    food_code = Column(Integer, nullable=False)
    subcode = Column(Integer, nullable=True)
    seq_num = Column(Integer, nullable=True)
    portion_code = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    portion_weight = Column(Float, nullable=True)
    change_type_to_weight = Column(String(1), nullable=True)

    __table_args__ = (
        _food_ref(),
        ForeignKeyConstraint(
            ["version_id", "portion_code"],
            ["food_portion_desc.version_id", "food_portion_desc.portion_code"],
        ),
        Index("idx_food_weights_food", "version_id", "food_code"),
    )


class MoistNFatAdjust(VersionedMixin, Base):
    __tablename__ = "moist_n_fat_adjust"

    food_code = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    moisture_change = Column(Float, nullable=True)
    fat_change = Column(Float, nullable=True)
    type_of_fat = Column(Integer, nullable=True)

    __table_args__ = (
        _food_ref(),
    )


class AddFoodDesc(VersionedMixin, Base):
    __tablename__ = "add_food_desc"

    food_code = Column(Integer, nullable=False)
    seq_num = Column(Integer, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    additional_food_description = Column(Text, nullable=True)

    __table_args__ = (
        _food_ref(),
    )


class FnddsSrLinks(VersionedMixin, Base):
    """Links from FNDDS foods to USDA Standard Reference ingredients"""
    __tablename__ = "fndds_sr_links"

    food_code = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    seq_num = Column(Integer, nullable=True)
    sr_code = Column(Integer, nullable=True)
    sr_description = Column(String(200), nullable=True)
    amount = Column(Float, nullable=True)
    measure = Column(String(3), nullable=True)
    portion_code = Column(Integer, nullable=True)
    retention_code = Column(Integer, nullable=True)
    flag = Column(Integer, nullable=True)
    weight = Column(Float, nullable=True)
    change_type_to_sr_code = Column(String(1), nullable=True)
    change_type_to_weight = Column(String(1), nullable=True)
    change_type_to_retn_code = Column(String(1), nullable=True)

    __table_args__ = (
        _food_ref(),
        Index("idx_sr_links_food", "version_id", "food_code"),
    )


class FnddsNutVal(VersionedMixin, Base):
    __tablename__ = "fndds_nut_val"

    food_code = Column(Integer, nullable=False)
    nutrient_code = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    nutrient_value = Column(Float, nullable=True)

    __table_args__ = (
        _food_ref(),
        _nutrient_ref(),
        Index("idx_nut_val_food", "version_id", "food_code"),
    )


class ModDesc(VersionedMixin, Base):
    __tablename__ = "mod_desc"

    modification_code = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    modification_description = Column(String(200), nullable=True)
    food_code = Column(Integer, nullable=False)

    __table_args__ = (
        _food_ref(),
        UniqueConstraint("version_id", "modification_code"),
    )


class ModNutVal(VersionedMixin, Base):
    __tablename__ = "mod_nut_val"

    modification_code = Column(Integer, nullable=False)
    nutrient_code = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    nutrient_value = Column(Float, nullable=True)

    __table_args__ = (
        ForeignKeyConstraint(
            ["version_id", "modification_code"],
            ["mod_desc.version_id", "mod_desc.modification_code"],
        ),
        _nutrient_ref(),
    )
