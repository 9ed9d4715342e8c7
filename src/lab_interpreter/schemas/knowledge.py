"""Clinical knowledge tables for result interpretation.

Interpretation sentences are keyed by normalized test name, one table per
abnormality direction. Recommendations are keyed by ``(test, status)`` and
expanded from rule groups so that analytes sharing follow-up (for example
creatinine and BUN) are listed once. All tables are read-only views built at
import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

NORMAL_INTERPRETATION = "Result is within normal limits."

GENERIC_INTERPRETATION = (
    "{direction} result detected. "
    "Correlate with clinical presentation and other laboratory values."
)

CRITICAL_NOTIFICATION = "⚠️ CRITICAL VALUE - Notify ordering physician immediately"
CRITICAL_REPEAT_TEST = "Consider repeat testing to confirm result"
FALLBACK_RECOMMENDATION = "Follow up as clinically indicated."


def normalize_key(name: str | None) -> str:
    """Lookup key for test names and gender codes (stripped, lower-case)."""
    if not name:
        return ""
    return name.strip().lower()


LOW_INTERPRETATIONS: Mapping[str, str] = MappingProxyType({
    "hemoglobin": "Low hemoglobin may indicate anemia. Consider evaluation for iron deficiency, B12 deficiency, or chronic disease.",
    "hematocrit": "Low hematocrit supports anemia diagnosis. Correlate with hemoglobin and RBC values.",
    "wbc": "Low WBC (leukopenia) may indicate bone marrow suppression, infection, or medication effect. Consider differential.",
    "platelets": "Low platelets (thrombocytopenia) increases bleeding risk. Evaluate for immune or bone marrow causes.",
    "albumin": "Low albumin indicates poor nutritional status or liver disease. Monitor closely.",
    "glucose": "Low glucose (hypoglycemia) requires immediate clinical attention. Symptoms should be assessed.",
    "sodium": "Low sodium (hyponatremia) affects fluid balance. Determine cause (SIADH, dehydration, medication).",
    "potassium": "Low potassium (hypokalemia) affects cardiac function. May need supplementation.",
    "calcium": "Low calcium affects bone health and neuromuscular function. Evaluate vitamin D and PTH.",
    "phosphorus": "Low phosphorus affects energy metabolism. Correlate with calcium.",
    "magnesium": "Low magnesium affects muscle and nerve function. May cause weakness and arrhythmias.",
    "creatinine": "Low creatinine may indicate muscle loss or malnutrition rather than improved kidney function.",
    "bun": "Low BUN may indicate liver disease, malnutrition, or pregnancy.",
    "cholesterol": "Low cholesterol may indicate malnutrition, liver disease, or medication effect.",
    "hdl": "Low HDL (good cholesterol) increases cardiovascular risk. Recommend lifestyle modifications.",
    "ldl": "Low LDL is generally favorable and reduces cardiovascular risk.",
    "triglycerides": "Low triglycerides are favorable for cardiovascular health.",
})

HIGH_INTERPRETATIONS: Mapping[str, str] = MappingProxyType({
    "hemoglobin": "High hemoglobin (polycythemia) may indicate dehydration, smoking, or bone marrow disorder. Evaluate plasma volume.",
    "hematocrit": "High hematocrit supports polycythemia. May increase thrombotic risk.",
    "wbc": "High WBC (leukocytosis) suggests infection, leukemia, or inflammatory condition. Review differential.",
    "platelets": "High platelets (thrombocytosis) may indicate reactive condition or myeloproliferative disorder.",
    "glucose": "High glucose (hyperglycemia) suggests diabetes or stress response. Consider HbA1c and glucose tolerance test.",
    "sodium": "High sodium (hypernatremia) indicates dehydration or excessive sodium intake. Assess fluid status.",
    "potassium": "High potassium (hyperkalemia) affects cardiac function. Consider ECG and treatment if severe.",
    "calcium": "High calcium may indicate hyperparathyroidism, malignancy, or vitamin D toxicity. Evaluate PTH.",
    "phosphorus": "High phosphorus often correlates with kidney disease. Assess renal function.",
    "magnesium": "High magnesium is rare but can cause neuromuscular dysfunction.",
    "creatinine": "High creatinine indicates reduced kidney function. Calculate eGFR for proper assessment.",
    "bun": "High BUN suggests kidney dysfunction or dehydration. Compare with creatinine ratio.",
    "cholesterol": "High total cholesterol increases cardiovascular risk. Review lipid panel and risk factors.",
    "hdl": "High HDL (good cholesterol) is protective against cardiovascular disease.",
    "ldl": "High LDL increases cardiovascular risk. Recommend statin therapy per guidelines.",
    "triglycerides": "High triglycerides increase pancreatitis and cardiovascular risk. Consider lipid-lowering therapy.",
    "ast": "High AST suggests liver, heart, or muscle damage. Evaluate AST/ALT ratio and other liver tests.",
    "alt": "High ALT is more specific for liver damage. Evaluate viral hepatitis and fatty liver.",
    "alp": "High ALP may indicate liver, bone, or biliary disease. Check liver enzymes and GGT.",
    "bilirubin": "High bilirubin indicates jaundice. Determine if conjugated or unconjugated.",
})

# (tests sharing the rules, {status: actions})
_RECOMMENDATION_RULES: tuple[tuple[tuple[str, ...], dict[str, tuple[str, ...]]], ...] = (
    (
        ("glucose",),
        {
            "LOW": ("Assess for hypoglycemic symptoms",),
            "HIGH": ("Order HbA1c and glucose tolerance test",),
        },
    ),
    (
        ("hemoglobin", "hematocrit"),
        {
            "LOW": ("Check peripheral blood smear", "Consider iron studies"),
            "HIGH": ("Assess hydration status", "Consider phlebotomy if confirmed"),
        },
    ),
    (
        ("creatinine", "bun"),
        {
            "HIGH": (
                "Calculate eGFR",
                "Check urine protein and microscopy",
                "Monitor blood pressure",
            ),
        },
    ),
    (
        ("potassium",),
        {
            "LOW": ("May need potassium supplementation",),
            "HIGH": ("Restrict dietary potassium",),
            "CRITICAL_LOW": ("Obtain ECG", "Consider emergency treatment"),
            "CRITICAL_HIGH": ("Obtain ECG", "Consider emergency treatment"),
        },
    ),
    (
        ("cholesterol", "ldl"),
        {
            "HIGH": (
                "Assess cardiovascular risk factors",
                "Consider statin therapy",
                "Recommend lifestyle modifications (diet, exercise)",
            ),
        },
    ),
    (
        ("ast", "alt"),
        {
            "HIGH": (
                "Check hepatitis serology",
                "Assess for alcohol use and medications",
                "Ultrasound may be indicated",
            ),
        },
    ),
)


def _expand_rules() -> dict[tuple[str, str], tuple[str, ...]]:
    table: dict[tuple[str, str], tuple[str, ...]] = {}
    for tests, actions_by_status in _RECOMMENDATION_RULES:
        for test in tests:
            for status, actions in actions_by_status.items():
                table[(test, status)] = actions
    return table


RECOMMENDATIONS: Mapping[tuple[str, str], tuple[str, ...]] = MappingProxyType(
    _expand_rules()
)
