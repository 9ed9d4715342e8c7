from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Sequence

from lab_interpreter.errors import NoRangeAvailable
from lab_interpreter.pipeline.flag import determine_abnormal_flag
from lab_interpreter.pipeline.interpret import (
    generate_interpretation,
    generate_recommendations,
    requires_immediate_notification,
)
from lab_interpreter.pipeline.select import select_normal_range
from lab_interpreter.schemas.batch import BatchItemResult, BatchReport
from lab_interpreter.schemas.config import InterpreterConfig
from lab_interpreter.schemas.lab_result import (
    InterpretationResult,
    ReferenceRange,
    ResultRequest,
)
from lab_interpreter.schemas.reference_ranges import lookup_reference_ranges

logger = logging.getLogger(__name__)


def interpret_result(
    test_type: str,
    value: float,
    normal_ranges: Sequence[ReferenceRange],
    age: float,
    gender: str | None = None,
) -> InterpretationResult:
    normal_range = select_normal_range(normal_ranges, age, gender, test_type=test_type)
    abnormal_flag = determine_abnormal_flag(value, normal_range)
    interpretation = generate_interpretation(test_type, abnormal_flag.status)
    recommendations = generate_recommendations(test_type, abnormal_flag.status)

    logger.debug(
        "interpret: %s=%s -> %s (range %s)",
        test_type,
        value,
        abnormal_flag.status,
        normal_range.id,
    )

    return InterpretationResult(
        value=value,
        normal_range=normal_range,
        abnormal_flag=abnormal_flag,
        interpretation=interpretation,
        recommendations=recommendations or None,
    )


def _candidates_for(
    request: ResultRequest, config: InterpreterConfig
) -> Sequence[ReferenceRange]:
    if request.normal_ranges is not None:
        return request.normal_ranges
    if config.use_reference_catalog:
        return lookup_reference_ranges(request.test_type)
    return ()


def _interpret_entry(
    index: int, request: ResultRequest, config: InterpreterConfig
) -> BatchItemResult:
    try:
        result = interpret_result(
            request.test_type,
            request.value,
            _candidates_for(request, config),
            request.age,
            request.gender,
        )
    except NoRangeAvailable as exc:
        if config.fail_fast:
            raise
        logger.warning("batch: entry %d (%s) skipped - %s", index, request.test_type, exc)
        return BatchItemResult(index=index, test_type=request.test_type, error=str(exc))

    return BatchItemResult(index=index, test_type=request.test_type, result=result)


def interpret_results(
    requests: Sequence[ResultRequest | dict[str, Any]],
    config: InterpreterConfig | None = None,
) -> list[BatchItemResult]:
    """Interpret many results, one BatchItemResult per request in input order.

    An entry without reference ranges is reported through its ``error`` field
    and does not stop the others, unless ``config.fail_fast`` is set, in which
    case the first NoRangeAvailable propagates.
    """
    config = config or InterpreterConfig()
    parsed = [
        r if isinstance(r, ResultRequest) else ResultRequest.model_validate(r)
        for r in requests
    ]

    if config.max_workers > 1 and len(parsed) > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            return list(
                pool.map(
                    _interpret_entry,
                    range(len(parsed)),
                    parsed,
                    [config] * len(parsed),
                )
            )

    return [_interpret_entry(i, request, config) for i, request in enumerate(parsed)]


def run_batch(
    requests: Sequence[ResultRequest | dict[str, Any]],
    config: InterpreterConfig | None = None,
) -> BatchReport:
    start = time.time()
    items = interpret_results(requests, config)

    results = [item.result for item in items if item.result is not None]
    flagged_count = sum(1 for r in results if r.abnormal_flag.status != "NORMAL")
    critical_count = sum(
        1 for r in results if requires_immediate_notification(r.abnormal_flag)
    )
    failed_count = len(items) - len(results)
    total_time = time.time() - start

    logger.info(
        "batch: %d/%d interpreted, %d flagged (%d critical), %d failed in %.3fs",
        len(results),
        len(items),
        flagged_count,
        critical_count,
        failed_count,
        total_time,
    )

    return BatchReport(
        items=items,
        total_time_seconds=total_time,
        success=failed_count == 0,
        interpreted_count=len(results),
        flagged_count=flagged_count,
        critical_count=critical_count,
        failed_count=failed_count,
    )
