from __future__ import annotations

import logging
from typing import Sequence

from lab_interpreter.errors import NoRangeAvailable
from lab_interpreter.schemas.knowledge import normalize_key
from lab_interpreter.schemas.lab_result import AgeRange, ReferenceRange

logger = logging.getLogger(__name__)


def is_in_age_range(age: float, age_range: AgeRange | None) -> bool:
    """A missing age range contains every age."""
    if age_range is None:
        return True
    return age_range.contains(age)


def select_normal_range(
    candidates: Sequence[ReferenceRange],
    age: float,
    gender: str | None = None,
    *,
    test_type: str | None = None,
) -> ReferenceRange:
    """
    Pick the reference range that applies to a patient.

    First match wins, in this order:
    1. age-containing (or ageless) range with the patient's gender
    2. age-containing (or ageless) range with no gender
    3. range with the patient's gender and no age range
    4. range with neither age range nor gender
    5. the first candidate

    Raises NoRangeAvailable when there are no candidates.
    """
    if not candidates:
        raise NoRangeAvailable(test_type)

    wanted_gender = normalize_key(gender)

    def _gender_matches(candidate: ReferenceRange) -> bool:
        return bool(candidate.gender) and normalize_key(candidate.gender) == wanted_gender

    if wanted_gender:
        for candidate in candidates:
            if is_in_age_range(age, candidate.age_range) and _gender_matches(candidate):
                logger.debug("select: %s matched on age+gender", candidate.id)
                return candidate

    for candidate in candidates:
        if is_in_age_range(age, candidate.age_range) and not candidate.gender:
            logger.debug("select: %s matched on age", candidate.id)
            return candidate

    if wanted_gender:
        for candidate in candidates:
            if _gender_matches(candidate) and candidate.age_range is None:
                logger.debug("select: %s matched on gender", candidate.id)
                return candidate

    for candidate in candidates:
        if candidate.age_range is None and not candidate.gender:
            logger.debug("select: %s is the unrestricted default", candidate.id)
            return candidate

    logger.debug(
        "select: no candidate fits age=%s gender=%s, using first of %d",
        age,
        gender,
        len(candidates),
    )
    return candidates[0]
