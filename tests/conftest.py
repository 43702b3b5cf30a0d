"""
Pytest configuration and fixtures
"""

import pytest
import pytest_asyncio
import pandas as pd
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool
from typing import AsyncGenerator

from ingestion.sources.base import RowSource
from models import Base

DATES = {"Start_date": "1/1/2009", "End_date": "12/31/2010"}


class StaticRowSource(RowSource):
    """In-memory row source recording the tables it was asked for"""

    def __init__(self, tables):
        self.tables = tables
        self.queries = []
        self.opened = False
        self.closed = False

    @property
    def display_name(self) -> str:
        return "static"

    async def open(self):
        self.opened = True

    async def close(self):
        self.closed = True

    async def query(self, table_name, columns=None):
        self.queries.append(table_name)
        for row in self.tables.get(table_name, []):
            yield self.normalize_row(row)


@pytest.fixture
def static_source():
    """Factory for in-memory row sources"""
    return StaticRowSource


@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path):
    """Create test destination engine"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'destination.db'}",
        echo=False,
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create destination session for tests"""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def fndds_tables():
    """A small FNDDS release, keyed by source table name"""
    return {
        "FoodPortionDesc": pd.DataFrame([
            {"Portion_code": 10205, **DATES, "Portion_description": "1 cup"},
            {"Portion_code": 90000, **DATES, "Portion_description": "Quantity not specified"},
        ]),
        "SubcodeDesc": pd.DataFrame([
            {"Subcode": 0, **DATES, "Subcode_description": "None"},
        ]),
        "MainFoodDesc": pd.DataFrame([
            {"Food_code": 11111000, **DATES, "Main_food_description": "Milk, human",
             "Fortification_identifier": 0},
            {"Food_code": 11112110, **DATES, "Main_food_description": "Milk, cow's, fluid, 2% fat",
             "Fortification_identifier": 1},
        ]),
        "NutDesc": pd.DataFrame([
            {"Nutrient_code": 203, "Nutrient_description": "Protein", "Tagname": "PROCNT",
             "Unit": "g", "Decimals": 2},
            {"Nutrient_code": 208, "Nutrient_description": "Energy", "Tagname": "ENERC_KCAL",
             "Unit": "kcal", "Decimals": 0},
        ]),
        "FoodWeights": pd.DataFrame([
            {"Food_code": 11112110, "Subcode": 0, "Seq_num": 1, "Portion_code": 10205, **DATES,
             "Portion_weight": 244.0, "Change_type_to_weight": ""},
        ]),
        "MoistNFatAdjust": pd.DataFrame([
            {"Food_code": 11112110, **DATES, "Moisture_change": 0.0, "Fat_change": 0.0,
             "Type_of_fat": 0},
        ]),
        "AddFoodDesc": pd.DataFrame([
            {"Food_code": 11112110, "Seq_num": 1, **DATES,
             "Additional_food_description": "2% milk"},
        ]),
        "FNDDSSRLinks": pd.DataFrame([
            {"Food_code": 11112110, **DATES, "Seq_num": 1, "SR_code": 1079,
             "SR_description": "Milk, reduced fat, fluid, 2%", "Amount": 100.0, "Measure": "GM",
             "Portion_code": 0, "Retention_code": 0, "Flag": 0, "Weight": 100.0,
             "Change_type_to_SR_code": "", "Change_type_to_weight": "",
             "Change_type_to_retn_code": ""},
        ]),
        "FNDDSNutVal": pd.DataFrame([
            {"Food_code": 11111000, "Nutrient_code": 203, **DATES, "Nutrient_value": 1.03},
            {"Food_code": 11111000, "Nutrient_code": 208, **DATES, "Nutrient_value": 70.0},
            {"Food_code": 11112110, "Nutrient_code": 203, **DATES, "Nutrient_value": 3.3},
            {"Food_code": 11112110, "Nutrient_code": 208, **DATES, "Nutrient_value": 50.0},
        ]),
        "ModDesc": pd.DataFrame([
            {"Modification_code": 100001, **DATES, "Modification_description": "Milk, low sodium",
             "Food_code": 11112110},
        ]),
        "ModNutVal": pd.DataFrame(columns=[
            "Modification_code", "Nutrient_code", "Start_date", "End_date", "Nutrient_value",
        ]),
    }


FNDDS_ROW_COUNTS = [
    ("food_portion_desc", 2),
    ("subcode_desc", 1),
    ("main_food_desc", 2),
    ("nut_desc", 2),
    ("food_weights", 1),
    ("moist_n_fat_adjust", 1),
    ("add_food_desc", 1),
    ("fndds_sr_links", 1),
    ("fndds_nut_val", 4),
    ("mod_desc", 1),
    ("mod_nut_val", 0),
]


@pytest.fixture
def fndds_row_counts():
    """Expected loader reports for fndds_tables, in load order"""
    return list(FNDDS_ROW_COUNTS)


@pytest.fixture
def fped_tables():
    """FPED tables for the 2005-2006 and 2013-2014 releases"""
    return {
        "FPED_0506": pd.DataFrame([
            {"FOODCODE": 11111000, "MODCODE": 0, "DESCRIPTION": "Milk, human",
             "F_TOTAL": 0.0, "D_TOTAL": 0.413, "ADD_SUGARS": 1.5},
            {"FOODCODE": 11112110, "MODCODE": 0, "DESCRIPTION": "Milk, cow's, fluid, 2% fat",
             "F_TOTAL": 0.0, "D_TOTAL": 0.41, "ADD_SUGARS": 0.0},
            {"FOODCODE": 11112110, "MODCODE": 100001, "DESCRIPTION": "Milk, low sodium",
             "F_TOTAL": 0.0, "D_TOTAL": 0.41, "ADD_SUGARS": 0.0},
        ]),
        "FPED_1314": pd.DataFrame([
            {"FOODCODE": 11111000, "MODCODE": 0, "DESCRIPTION": "Milk, human",
             "F_TOTAL": 0.0, "D_TOTAL": 0.413},
            {"FOODCODE": 11112110, "MODCODE": 0, "DESCRIPTION": "Milk, cow's, fluid, 2% fat",
             "F_TOTAL": 0.0, "D_TOTAL": 0.41},
            {"FOODCODE": 11112110, "MODCODE": 100001, "DESCRIPTION": "Milk, low sodium",
             "F_TOTAL": 0.0, "D_TOTAL": 0.41},
        ]),
    }


@pytest.fixture
def source_url(tmp_path, fndds_tables, fped_tables):
    """SQLite source database holding the FNDDS and FPED fixture tables"""
    path = tmp_path / "source.db"
    engine = create_engine(f"sqlite:///{path}")

    for table_name, df in {**fndds_tables, **fped_tables}.items():
        df.to_sql(table_name, engine, index=False)

    engine.dispose()
    return f"sqlite+aiosqlite:///{path}"
