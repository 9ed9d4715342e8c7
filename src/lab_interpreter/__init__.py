"""Clinical interpretation of numeric laboratory results."""
from lab_interpreter.errors import NoRangeAvailable
from lab_interpreter.pipeline.runner import interpret_result, interpret_results, run_batch

__all__ = ["NoRangeAvailable", "interpret_result", "interpret_results", "run_batch"]
