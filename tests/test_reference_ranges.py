"""Tests for the built-in reference range catalog."""

import pytest
from lab_interpreter.pipeline.select import select_normal_range
from lab_interpreter.schemas.knowledge import RECOMMENDATIONS
from lab_interpreter.schemas.reference_ranges import REFERENCE_RANGES, lookup_reference_ranges


def test_lookup_glucose():
    """Glucose lookup returns the adult range with panic values."""
    candidates = lookup_reference_ranges("Glucose")
    assert len(candidates) == 1
    assert candidates[0].min_value == 70
    assert candidates[0].max_value == 100
    assert candidates[0].critical_low == 40
    assert candidates[0].critical_high == 500


def test_lookup_case_insensitive():
    """Lookup is case-insensitive."""
    assert lookup_reference_ranges("POTASSIUM") == lookup_reference_ranges("potassium")


def test_lookup_aliases_and_specimen_qualifiers():
    """Aliases and specimen-qualified names resolve to the same candidates."""
    assert lookup_reference_ranges("White Blood Cells") == lookup_reference_ranges("WBC")
    assert lookup_reference_ranges("Serum Creatinine") == REFERENCE_RANGES["creatinine"]
    assert lookup_reference_ranges("Whole Blood Potassium") == REFERENCE_RANGES["potassium"]
    assert lookup_reference_ranges("Bilirubin, Total") == REFERENCE_RANGES["bilirubin"]


def test_lookup_hdl_cholesterol_is_not_total():
    """'HDL Cholesterol' resolves to HDL, not total cholesterol."""
    assert lookup_reference_ranges("HDL Cholesterol") == REFERENCE_RANGES["hdl"]


@pytest.mark.parametrize(
    "name",
    ["Gastrin", "Blasts", "VLDL", "Non-HDL Cholesterol", "Cobalt", "p"],
)
def test_lookup_does_not_match_inside_other_names(name):
    """Names that merely contain a catalog key get no ranges."""
    assert lookup_reference_ranges(name) == ()


def test_lookup_unknown_returns_empty():
    """Unknown test name returns an empty tuple (no exception)."""
    assert lookup_reference_ranges("NONEXISTENT_TEST_XYZ") == ()


def test_lookup_empty_string():
    """Empty string returns an empty tuple gracefully."""
    assert lookup_reference_ranges("") == ()


@pytest.mark.parametrize(
    "age, gender, expected",
    [
        (40, "M", "hgb-m"),
        (40, "f", "hgb-f"),
        (8, "F", "hgb-child"),
        (40, None, "hgb"),
        (17.995, "F", "hgb-child"),
        (17.995, None, "hgb-child"),
        (18, "F", "hgb-f"),
        (18, "M", "hgb-m"),
    ],
)
def test_hemoglobin_demographic_selection(age, gender, expected):
    """Hemoglobin candidates resolve by age and gender."""
    candidates = lookup_reference_ranges("hemoglobin")
    assert select_normal_range(candidates, age, gender).id == expected


def test_every_recommendation_test_has_ranges():
    """Every test with specific recommendations is in the catalog."""
    for test, _status in RECOMMENDATIONS:
        assert lookup_reference_ranges(test), test


def test_all_entries_have_units_and_valid_bounds():
    """Catalog entries carry a unit and ordered bounds."""
    for name, candidates in REFERENCE_RANGES.items():
        assert candidates, name
        for ref in candidates:
            assert ref.unit, name
            assert ref.min_value <= ref.max_value, name
