"""Tests for age advisories."""

import pytest

from investigator.rules.age import age_rule_text


class TestAgeRuleText:
    """Tests for age band lookup."""

    def test_adult_band(self):
        assert age_rule_text(25).startswith("Age 20-39")

    def test_too_young(self):
        assert age_rule_text(10) == ""
        assert age_rule_text(14) == ""

    @pytest.mark.parametrize(
        ("age", "prefix"),
        [
            (15, "Age 15-19"),
            (19, "Age 15-19"),
            (20, "Age 20-39"),
            (39, "Age 20-39"),
            (40, "Age 40-49"),
            (49, "Age 40-49"),
            (50, "Age 50-59"),
            (60, "Age 60-69"),
            (70, "Age 70-79"),
            (79, "Age 70-79"),
            (80, "Age 80+"),
            (104, "Age 80+"),
        ],
    )
    def test_band_edges(self, age, prefix):
        assert age_rule_text(age).startswith(prefix)

    def test_bands_describe_penalties(self):
        assert "APP" in age_rule_text(45)
        assert "Luck" in age_rule_text(17)
