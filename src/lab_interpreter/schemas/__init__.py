"""Schema definitions for lab result interpretation."""
from lab_interpreter.schemas.lab_result import (
    AgeRange,
    ReferenceRange,
    AbnormalFlag,
    InterpretationResult,
    ResultRequest,
)
from lab_interpreter.schemas.batch import BatchItemResult, BatchReport
from lab_interpreter.schemas.config import InterpreterConfig

__all__ = [
    "AgeRange", "ReferenceRange", "AbnormalFlag", "InterpretationResult",
    "ResultRequest", "BatchItemResult", "BatchReport", "InterpreterConfig",
]
