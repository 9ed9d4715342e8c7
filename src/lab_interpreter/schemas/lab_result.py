from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

FlagStatus = Literal["NORMAL", "LOW", "HIGH", "CRITICAL_LOW", "CRITICAL_HIGH"]
Severity = Literal["INFO", "WARNING", "CRITICAL"]

# Input models accept snake_case or camelCase keys (minValue, ageRange, ...)
# and reject NaN/inf, which would slip through every strict comparison.
_INPUT_CONFIG = ConfigDict(
    frozen=True,
    allow_inf_nan=False,
    alias_generator=to_camel,
    populate_by_name=True,
)


class AgeRange(BaseModel):
    model_config = _INPUT_CONFIG

    min: float | None = None  # Years, inclusive; None = unbounded
    max: float | None = None

    def contains(self, age: float) -> bool:
        if self.min is not None and age < self.min:
            return False
        if self.max is not None and age > self.max:
            return False
        return True


class ReferenceRange(BaseModel):
    model_config = _INPUT_CONFIG

    id: str | None = None
    min_value: float
    max_value: float
    critical_low: float | None = None
    critical_high: float | None = None
    unit: str | None = None  # Display only, e.g. "mg/dL"
    age_range: AgeRange | None = None
    gender: str | None = None  # e.g. "M", "F"; None = any

    @model_validator(mode="after")
    def _check_bounds(self) -> ReferenceRange:
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value {self.min_value} is greater than max_value {self.max_value}"
            )
        return self


class AbnormalFlag(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: FlagStatus
    severity: Severity
    message: str


class InterpretationResult(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    value: float
    normal_range: ReferenceRange
    abnormal_flag: AbnormalFlag
    interpretation: str
    recommendations: list[str] | None = None


class ResultRequest(BaseModel):
    model_config = _INPUT_CONFIG

    test_type: str  # e.g. "glucose", "Hemoglobin"
    value: float
    normal_ranges: list[ReferenceRange] | None = None  # None = use catalog
    age: float = Field(ge=0)
    gender: str | None = None
