from __future__ import annotations

import re

from lab_interpreter.schemas.knowledge import normalize_key
from lab_interpreter.schemas.lab_result import AgeRange, ReferenceRange

ADULT = AgeRange(min=18)
CHILD = AgeRange(min=0, max=18)  # Meets ADULT at 18; the gendered adult ranges win there


def _rr(
    id: str,
    low: float,
    high: float,
    unit: str,
    critical_low: float | None = None,
    critical_high: float | None = None,
    age_range: AgeRange | None = None,
    gender: str | None = None,
) -> ReferenceRange:
    return ReferenceRange(
        id=id,
        min_value=low,
        max_value=high,
        critical_low=critical_low,
        critical_high=critical_high,
        unit=unit,
        age_range=age_range,
        gender=gender,
    )


_HEMOGLOBIN = (
    _rr("hgb-m", 13.5, 17.5, "g/dL", 7.0, 20.0, ADULT, "M"),
    _rr("hgb-f", 12.0, 16.0, "g/dL", 7.0, 20.0, ADULT, "F"),
    _rr("hgb-child", 11.0, 14.5, "g/dL", 7.0, 20.0, CHILD),
    _rr("hgb", 12.0, 17.5, "g/dL", 7.0, 20.0),
)
_HEMATOCRIT = (
    _rr("hct-m", 38.3, 48.6, "%", 20.0, 60.0, ADULT, "M"),
    _rr("hct-f", 35.5, 44.9, "%", 20.0, 60.0, ADULT, "F"),
    _rr("hct", 35.5, 48.6, "%", 20.0, 60.0),
)
_WBC = (
    _rr("wbc-child", 5.0, 14.5, "K/uL", 2.5, 50.0, CHILD),
    _rr("wbc", 4.5, 11.0, "K/uL", 2.5, 50.0),
)
_PLATELETS = (_rr("plt", 150.0, 400.0, "K/uL", 20.0, 1000.0),)
_RBC = (
    _rr("rbc-m", 4.7, 6.1, "M/uL", gender="M"),
    _rr("rbc-f", 4.2, 5.4, "M/uL", gender="F"),
    _rr("rbc", 4.2, 6.1, "M/uL"),
)
_BILIRUBIN = (_rr("tbil", 0.1, 1.2, "mg/dL"),)
_CHOLESTEROL = (_rr("chol", 0.0, 200.0, "mg/dL"),)
_HDL = (_rr("hdl", 40.0, 60.0, "mg/dL"),)
_LDL = (_rr("ldl", 0.0, 100.0, "mg/dL"),)

REFERENCE_RANGES: dict[str, tuple[ReferenceRange, ...]] = {
    # CBC - Complete Blood Count
    "hemoglobin": _HEMOGLOBIN,
    "hgb": _HEMOGLOBIN,
    "hematocrit": _HEMATOCRIT,
    "hct": _HEMATOCRIT,
    "wbc": _WBC,
    "white blood cells": _WBC,
    "platelets": _PLATELETS,
    "rbc": _RBC,
    # Metabolic Panel
    "glucose": (_rr("glu", 70.0, 100.0, "mg/dL", 40.0, 500.0),),
    "bun": (_rr("bun", 7.0, 20.0, "mg/dL", critical_high=100.0),),
    "blood urea nitrogen": (_rr("bun", 7.0, 20.0, "mg/dL", critical_high=100.0),),
    "creatinine": (
        _rr("crea-m", 0.7, 1.3, "mg/dL", critical_high=4.0, gender="M"),
        _rr("crea-f", 0.6, 1.1, "mg/dL", critical_high=4.0, gender="F"),
        _rr("crea", 0.6, 1.3, "mg/dL", critical_high=4.0),
    ),
    "sodium": (_rr("na", 136.0, 145.0, "mEq/L", 120.0, 160.0),),
    "potassium": (_rr("k", 3.5, 5.0, "mEq/L", 2.5, 6.5),),
    "calcium": (_rr("ca", 8.5, 10.5, "mg/dL", 6.5, 13.0),),
    "phosphorus": (_rr("phos", 2.5, 4.5, "mg/dL"),),
    "magnesium": (_rr("mg", 1.7, 2.2, "mg/dL"),),
    "albumin": (_rr("alb", 3.5, 5.0, "g/dL"),),
    # Lipid Panel
    "hdl": _HDL,
    "hdl cholesterol": _HDL,
    "ldl": _LDL,
    "ldl cholesterol": _LDL,
    "triglycerides": (_rr("tg", 0.0, 150.0, "mg/dL"),),
    "cholesterol": _CHOLESTEROL,
    "total cholesterol": _CHOLESTEROL,
    # Liver Function Tests
    "alt": (_rr("alt", 7.0, 56.0, "U/L"),),
    "ast": (_rr("ast", 10.0, 40.0, "U/L"),),
    "alp": (
        _rr("alp-child", 100.0, 390.0, "U/L", age_range=CHILD),
        _rr("alp", 44.0, 147.0, "U/L"),
    ),
    "bilirubin": _BILIRUBIN,
    "bilirubin total": _BILIRUBIN,
    # Thyroid Function Tests
    "tsh": (_rr("tsh", 0.4, 4.0, "mIU/L"),),
    "free t4": (_rr("ft4", 0.8, 1.8, "ng/dL"),),
}


# Specimen words that do not change which analyte is meant ("Serum Creatinine").
SPECIMEN_QUALIFIERS = frozenset({"serum", "plasma", "blood", "whole", "venous", "fasting"})


def lookup_reference_ranges(test_name: str) -> tuple[ReferenceRange, ...]:
    """
    Look up candidate reference ranges for a test name.

    Normalizes the test name (lowercase, strip whitespace) and tries:
    1. Exact match on a catalog name or alias
    2. Exact match after dropping specimen qualifiers and punctuation

    No partial matching: "VLDL" is not "LDL" and "Blasts" is not "AST", so an
    unknown name returns an empty tuple and ends in NoRangeAvailable.
    """
    normalized = normalize_key(test_name)
    if not normalized:
        return ()

    if normalized in REFERENCE_RANGES:
        return REFERENCE_RANGES[normalized]

    tokens = re.findall(r"[a-z0-9]+", normalized)
    for key in (
        " ".join(tokens),
        " ".join(t for t in tokens if t not in SPECIMEN_QUALIFIERS),
    ):
        if key in REFERENCE_RANGES:
            return REFERENCE_RANGES[key]

    return ()
