from __future__ import annotations

from lab_interpreter.schemas.lab_result import AbnormalFlag, ReferenceRange


def format_number(value: float) -> str:
    """Render integral floats without a trailing ``.0`` (45.0 -> "45")."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def determine_abnormal_flag(value: float, normal_range: ReferenceRange) -> AbnormalFlag:
    """Classify a value against a reference range.

    Critical thresholds are checked before the normal bounds. All comparisons
    are strict, so a value sitting exactly on a bound does not breach it.
    """
    shown = format_number(value)
    bounds = (
        f"{format_number(normal_range.min_value)}-{format_number(normal_range.max_value)}"
    )

    if normal_range.critical_low is not None and value < normal_range.critical_low:
        return AbnormalFlag(
            status="CRITICAL_LOW",
            severity="CRITICAL",
            message=(
                f"CRITICAL LOW: {shown} "
                f"(critical threshold: {format_number(normal_range.critical_low)})"
            ),
        )

    if normal_range.critical_high is not None and value > normal_range.critical_high:
        return AbnormalFlag(
            status="CRITICAL_HIGH",
            severity="CRITICAL",
            message=(
                f"CRITICAL HIGH: {shown} "
                f"(critical threshold: {format_number(normal_range.critical_high)})"
            ),
        )

    if value < normal_range.min_value:
        return AbnormalFlag(
            status="LOW",
            severity="WARNING",
            message=f"Low: {shown} (normal range: {bounds})",
        )

    if value > normal_range.max_value:
        return AbnormalFlag(
            status="HIGH",
            severity="WARNING",
            message=f"High: {shown} (normal range: {bounds})",
        )

    return AbnormalFlag(
        status="NORMAL",
        severity="INFO",
        message=f"Normal: {shown} (normal range: {bounds})",
    )
