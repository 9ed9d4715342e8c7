from __future__ import annotations


class NoRangeAvailable(LookupError):
    """Raised when a test has no candidate reference ranges configured."""

    def __init__(self, test_type: str | None = None) -> None:
        self.test_type = test_type
        if test_type:
            message = f"No reference range configured for test {test_type}"
        else:
            message = "No reference ranges available"
        super().__init__(message)
