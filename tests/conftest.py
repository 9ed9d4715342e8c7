"""Shared pytest fixtures for lab_interpreter tests."""

import pytest
from lab_interpreter.schemas import AgeRange, ReferenceRange
from lab_interpreter.schemas.config import InterpreterConfig


@pytest.fixture
def glucose_ranges() -> list[ReferenceRange]:
    """Single adult glucose range with a critical low threshold."""
    return [ReferenceRange(min_value=70, max_value=100, critical_low=40, unit="mg/dL")]


@pytest.fixture
def simple_range() -> ReferenceRange:
    """10-20 range without critical thresholds."""
    return ReferenceRange(id="simple", min_value=10, max_value=20)


@pytest.fixture
def critical_range() -> ReferenceRange:
    """10-20 range with critical thresholds at 5 and 25."""
    return ReferenceRange(
        id="critical", min_value=10, max_value=20, critical_low=5, critical_high=25
    )


@pytest.fixture
def demographic_candidates() -> list[ReferenceRange]:
    """Pediatric female, pediatric, female and unrestricted ranges, in that order."""
    pediatric = AgeRange(min=0, max=12)
    return [
        ReferenceRange(id="child-f", min_value=11, max_value=15, age_range=pediatric, gender="F"),
        ReferenceRange(id="child", min_value=11, max_value=16, age_range=pediatric),
        ReferenceRange(id="female", min_value=12, max_value=16, gender="F"),
        ReferenceRange(id="default", min_value=12, max_value=17.5),
    ]


@pytest.fixture
def default_config() -> InterpreterConfig:
    """InterpreterConfig with defaults (sequential, isolating failures)."""
    return InterpreterConfig()
