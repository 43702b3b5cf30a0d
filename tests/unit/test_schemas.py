"""
Unit tests for source row schemas
"""

import pytest
from datetime import date, datetime
from pydantic import ValidationError
from schemas.base import parse_source_date
from schemas.fndds import FnddsSrLinksRow, FoodWeightsRow, MainFoodDescRow, NutDescRow
from schemas.fped import FpedEquivalentRow, FpedModEquivalentRow


class TestParseSourceDate:
    """Test the date forms used across releases"""

    @pytest.mark.parametrize("value", [
        "1/1/2009",
        "01/01/2009",
        "2009-01-01",
        "2009-01-01 00:00:00",
        "20090101",
        datetime(2009, 1, 1, 0, 0),
        date(2009, 1, 1),
    ])
    def test_parses(self, value):
        assert parse_source_date(value) == date(2009, 1, 1)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_is_none(self, value):
        assert parse_source_date(value) is None

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_source_date("sometime in 2009")


class TestFnddsRows:
    """Test FNDDS row mapping"""

    def test_main_food_desc(self):
        row = MainFoodDescRow.model_validate({
            "food_code": "11111000",
            "start_date": "1/1/2009",
            "end_date": "12/31/2010",
            "main_food_description": "  Milk, human ",
            "fortification_identifier": "",
        })

        assert row.model_dump() == {
            "start_date": date(2009, 1, 1),
            "end_date": date(2010, 12, 31),
            "food_code": 11111000,
            "main_food_description": "Milk, human",
            "fortification_identifier": None,
        }

    def test_unknown_columns_are_ignored(self):
        row = NutDescRow.model_validate({
            "nutrient_code": 203,
            "nutrient_description": "Protein",
            "unit": "g",
            "added_in_a_later_release": "x",
        })

        assert "added_in_a_later_release" not in row.model_dump()

    def test_missing_required_code_fails(self):
        with pytest.raises(ValidationError):
            FoodWeightsRow.model_validate({"food_code": 11112110, "portion_code": ""})

    def test_numeric_text_columns_are_kept_as_text(self):
        row = FnddsSrLinksRow.model_validate({
            "food_code": 11112110,
            "measure": 1,
            "change_type_to_weight": "",
            "amount": float("nan"),
        })

        assert row.measure == "1"
        assert row.change_type_to_weight is None
        assert row.amount is None


class TestFpedRows:
    """Test FPED row mapping"""

    def test_source_column_aliases(self):
        row = FpedModEquivalentRow.model_validate({
            "foodcode": "11112110",
            "modcode": "100001",
            "description": "Milk, low sodium",
            "d_total": "0.41",
        })

        assert row.food_code == 11112110
        assert row.mod_code == 100001
        assert row.d_total == 0.41
        assert row.f_total is None

    def test_equivalent_row_ignores_modcode(self):
        row = FpedEquivalentRow.model_validate({"foodcode": 11111000, "modcode": 0})

        assert "mod_code" not in row.model_dump()
