"""Lab Result Interpretation CLI.

Usage:
    uv run python -m lab_interpreter --input <results.json> [options]
    uv run python -m lab_interpreter --test glucose --value 45 --age 30 [options]
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

if TYPE_CHECKING:
    from lab_interpreter.schemas.batch import BatchReport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lab_interpreter",
        description="Interpret numeric lab results against age/gender-specific reference ranges",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--input",
        metavar="PATH",
        help="JSON file with one result request or a list of them",
    )
    group.add_argument(
        "--test",
        metavar="NAME",
        help="Interpret a single result for this test using built-in ranges",
    )

    parser.add_argument("--value", type=float, help="Result value (with --test)")
    parser.add_argument("--age", type=float, help="Patient age in years (with --test)")
    parser.add_argument("--gender", default=None, help="Patient gender code, e.g. M or F")
    parser.add_argument(
        "--output",
        metavar="PATH",
        default=None,
        help="Write output to file (default: stdout)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "report", "summary"],
        default="json",
        help="Output format: json, report (one block per result) or summary (table)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker threads for batch interpretation",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Abort the whole batch when a test has no reference range",
    )
    parser.add_argument(
        "--no-catalog",
        action="store_true",
        help="Do not fall back to built-in reference ranges for entries without ranges",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print debug logging to stderr",
    )
    return parser


def load_requests(path: Path) -> list[dict]:
    data = json.loads(path.read_text())
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ValueError("expected a JSON object or a list of objects")
    return data


def format_reports(report: BatchReport) -> str:
    from lab_interpreter.pipeline.report import format_report

    blocks = []
    for item in report.items:
        if item.result is None:
            blocks.append(f"\n{item.test_type}: {item.error}\n")
        else:
            blocks.append(format_report(item.test_type, item.result))
    return "".join(blocks)


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if args.test and (args.value is None or args.age is None):
        parser.error("--test requires --value and --age")

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level, format="%(levelname)s: %(message)s", stream=sys.stderr
    )

    from lab_interpreter.errors import NoRangeAvailable
    from lab_interpreter.pipeline.runner import run_batch
    from lab_interpreter.schemas.config import InterpreterConfig
    from lab_interpreter.schemas.lab_result import ResultRequest

    config = InterpreterConfig(
        max_workers=max(1, args.workers),
        fail_fast=args.fail_fast,
        use_reference_catalog=not args.no_catalog,
    )

    try:
        if args.input:
            input_path = Path(args.input)
            if not input_path.exists():
                print(f"Error: input file not found: {args.input}", file=sys.stderr)
                return 2
            requests = [ResultRequest.model_validate(r) for r in load_requests(input_path)]
        else:
            requests = [
                ResultRequest(
                    test_type=args.test,
                    value=args.value,
                    age=args.age,
                    gender=args.gender,
                )
            ]
    except (ValueError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError
        print(f"Error: invalid input: {exc}", file=sys.stderr)
        return 2

    try:
        report = run_batch(requests, config)
    except NoRangeAvailable as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.format == "summary":
        from lab_interpreter.pipeline.report import format_summary

        output_text = format_summary(report)
    elif args.format == "report":
        output_text = format_reports(report)
    else:
        output_text = json.dumps(report.model_dump(mode="json"), indent=2)

    if args.output:
        Path(args.output).write_text(output_text, encoding="utf-8")
    else:
        print(output_text)

    if not report.success:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
