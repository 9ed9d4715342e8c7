from __future__ import annotations

from lab_interpreter.pipeline.flag import format_number
from lab_interpreter.schemas.batch import BatchReport
from lab_interpreter.schemas.lab_result import InterpretationResult

RULE = "=" * 60


def format_report(test_type: str, result: InterpretationResult) -> str:
    """Format one InterpretationResult as a plain-text block."""
    normal_range = result.normal_range
    flag = result.abnormal_flag

    lines = [
        "",
        RULE,
        f"Test: {test_type}",
        f"Result: {format_number(result.value)} {normal_range.unit or ''}",
        f"Status: {flag.status}",
        f"Severity: {flag.severity}",
        (
            f"Normal Range: {format_number(normal_range.min_value)}"
            f"-{format_number(normal_range.max_value)}"
        ),
        "",
        "Interpretation:",
        result.interpretation,
    ]

    if result.recommendations:
        lines.append("")
        lines.append("Recommendations:")
        for rec in result.recommendations:
            lines.append(f"  • {rec}")

    lines.append(RULE)
    return "\n".join(lines) + "\n"


def format_summary(report: BatchReport) -> str:
    """Format a BatchReport as a human-readable text table."""
    lines = ["Lab Result Interpretation"]
    lines.append("=" * len(lines[0]))
    lines.append("")

    col_widths = [20, 10, 10, 14, 14, 10]
    header = (
        f"| {'Test':<{col_widths[0]}} | {'Value':<{col_widths[1]}} "
        f"| {'Unit':<{col_widths[2]}} | {'Reference':<{col_widths[3]}} "
        f"| {'Status':<{col_widths[4]}} | {'Severity':<{col_widths[5]}} |"
    )
    separator = "|" + "|".join("-" * (w + 2) for w in col_widths) + "|"
    lines.append(header)
    lines.append(separator)

    for item in report.items:
        if item.result is None:
            lines.append(
                f"| {item.test_type:<{col_widths[0]}} "
                f"| {'':<{col_widths[1]}} "
                f"| {'':<{col_widths[2]}} "
                f"| {'':<{col_widths[3]}} "
                f"| {'NO RANGE':<{col_widths[4]}} "
                f"| {'':<{col_widths[5]}} |"
            )
            continue

        result = item.result
        ref = result.normal_range
        ref_str = f"{format_number(ref.min_value)}-{format_number(ref.max_value)}"
        lines.append(
            f"| {item.test_type:<{col_widths[0]}} "
            f"| {format_number(result.value):<{col_widths[1]}} "
            f"| {(ref.unit or ''):<{col_widths[2]}} "
            f"| {ref_str:<{col_widths[3]}} "
            f"| {result.abnormal_flag.status:<{col_widths[4]}} "
            f"| {result.abnormal_flag.severity:<{col_widths[5]}} |"
        )

    lines.append("")
    lines.append(
        f"Interpreted: {report.interpreted_count}/{len(report.items)} "
        f"in {report.total_time_seconds:.3f}s"
    )
    lines.append(
        f"Flagged: {report.flagged_count} abnormal ({report.critical_count} critical)"
    )
    if report.failed_count:
        lines.append(f"Failed: {report.failed_count} (no reference range configured)")

    return "\n".join(lines)
