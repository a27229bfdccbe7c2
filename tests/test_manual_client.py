"""Tests for the interactive questionnaire validators."""

import pytest

from nutriplan.clients.manual.client import parse_list, range_validator


class TestRangeValidator:
    def test_accepts_value_in_range(self):
        assert range_validator("weight")("72.5") is True

    def test_rejects_out_of_range(self):
        assert range_validator("weight")("300") == "Must be between 35 and 250"

    @pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-inf"])
    def test_rejects_non_finite(self, text):
        assert range_validator("height")(text) == "Must be between 100 and 230"

    def test_rejects_garbage(self):
        assert range_validator("weight")("abc") == "Please enter a number"

    def test_integer_fields_reject_decimals(self):
        assert range_validator("age", integer=True)("30.5") == "Please enter a number"


class TestParseList:
    def test_splits_and_trims(self):
        assert parse_list(" Lactosa, ,Gluten ") == ["Lactosa", "Gluten"]

    def test_empty(self):
        assert parse_list(None) == []
        assert parse_list("") == []
