"""Tests for abnormal flag classification."""

import pytest
from lab_interpreter.pipeline.flag import determine_abnormal_flag, format_number
from lab_interpreter.schemas import ReferenceRange


@pytest.mark.parametrize("value", [10, 20, 15])
def test_bounds_are_normal(simple_range, value):
    """Values on or between the bounds are NORMAL."""
    flag = determine_abnormal_flag(value, simple_range)
    assert flag.status == "NORMAL"
    assert flag.severity == "INFO"


def test_just_below_min_is_low(simple_range):
    """9.999 against a 10-20 range is LOW."""
    flag = determine_abnormal_flag(9.999, simple_range)
    assert flag.status == "LOW"
    assert flag.severity == "WARNING"


def test_just_above_max_is_high(simple_range):
    """20.001 against a 10-20 range is HIGH."""
    flag = determine_abnormal_flag(20.001, simple_range)
    assert flag.status == "HIGH"
    assert flag.severity == "WARNING"


def test_critical_low_takes_precedence(critical_range):
    """Below the critical low threshold is CRITICAL_LOW, not LOW."""
    flag = determine_abnormal_flag(3, critical_range)
    assert flag.status == "CRITICAL_LOW"
    assert flag.severity == "CRITICAL"


def test_critical_high_takes_precedence(critical_range):
    """Above the critical high threshold is CRITICAL_HIGH, not HIGH."""
    flag = determine_abnormal_flag(30, critical_range)
    assert flag.status == "CRITICAL_HIGH"
    assert flag.severity == "CRITICAL"


def test_critical_thresholds_are_not_breached_on_equality(critical_range):
    """Values equal to critical thresholds fall back to LOW / HIGH."""
    assert determine_abnormal_flag(5, critical_range).status == "LOW"
    assert determine_abnormal_flag(25, critical_range).status == "HIGH"


def test_between_critical_and_normal_is_warning(critical_range):
    """Values between critical and normal bounds are plain LOW / HIGH."""
    assert determine_abnormal_flag(7, critical_range).status == "LOW"
    assert determine_abnormal_flag(22, critical_range).status == "HIGH"


def test_critical_checked_even_inside_normal_bounds():
    """A critical threshold inside the normal bounds still wins."""
    odd = ReferenceRange(min_value=10, max_value=20, critical_high=15)
    assert determine_abnormal_flag(16, odd).status == "CRITICAL_HIGH"


def test_messages():
    """Messages embed the value and the breached threshold or normal range."""
    ref = ReferenceRange(min_value=70, max_value=100, critical_low=40, critical_high=500)
    assert determine_abnormal_flag(35, ref).message == "CRITICAL LOW: 35 (critical threshold: 40)"
    assert determine_abnormal_flag(600, ref).message == "CRITICAL HIGH: 600 (critical threshold: 500)"
    assert determine_abnormal_flag(45, ref).message == "Low: 45 (normal range: 70-100)"
    assert determine_abnormal_flag(120.5, ref).message == "High: 120.5 (normal range: 70-100)"
    assert determine_abnormal_flag(85, ref).message == "Normal: 85 (normal range: 70-100)"


def test_format_number():
    """Integral floats drop the trailing .0."""
    assert format_number(45.0) == "45"
    assert format_number(45) == "45"
    assert format_number(9.999) == "9.999"
    assert format_number(-2.0) == "-2"
