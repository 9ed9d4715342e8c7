from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from lab_interpreter.schemas.lab_result import InterpretationResult


class BatchItemResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    test_type: str
    result: InterpretationResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchReport(BaseModel):
    items: list[BatchItemResult]
    total_time_seconds: float
    success: bool
    interpreted_count: int
    flagged_count: int
    critical_count: int
    failed_count: int
