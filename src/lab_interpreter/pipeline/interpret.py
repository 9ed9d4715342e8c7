from __future__ import annotations

from lab_interpreter.schemas.knowledge import (
    CRITICAL_NOTIFICATION,
    CRITICAL_REPEAT_TEST,
    FALLBACK_RECOMMENDATION,
    GENERIC_INTERPRETATION,
    HIGH_INTERPRETATIONS,
    LOW_INTERPRETATIONS,
    NORMAL_INTERPRETATION,
    RECOMMENDATIONS,
    normalize_key,
)
from lab_interpreter.schemas.lab_result import AbnormalFlag

CRITICAL_STATUSES = frozenset({"CRITICAL_LOW", "CRITICAL_HIGH"})
LOW_STATUSES = frozenset({"LOW", "CRITICAL_LOW"})


def generate_interpretation(test_type: str, status: str) -> str:
    if status == "NORMAL":
        return NORMAL_INTERPRETATION

    is_low = status in LOW_STATUSES
    table = LOW_INTERPRETATIONS if is_low else HIGH_INTERPRETATIONS
    known = table.get(normalize_key(test_type))
    if known is not None:
        return known
    return GENERIC_INTERPRETATION.format(direction="Low" if is_low else "High")


def generate_recommendations(test_type: str, status: str) -> list[str]:
    """Ordered follow-up actions; never empty.

    Critical results always lead with physician notification and a repeat
    test, followed by any test-specific actions for the status.
    """
    recommendations: list[str] = []

    if status in CRITICAL_STATUSES:
        recommendations.append(CRITICAL_NOTIFICATION)
        recommendations.append(CRITICAL_REPEAT_TEST)

    recommendations.extend(RECOMMENDATIONS.get((normalize_key(test_type), status), ()))

    if not recommendations:
        recommendations.append(FALLBACK_RECOMMENDATION)

    return recommendations


def requires_immediate_notification(flag: AbnormalFlag) -> bool:
    # Severity and status are checked separately in case they ever diverge.
    return flag.severity == "CRITICAL" or flag.status in CRITICAL_STATUSES
