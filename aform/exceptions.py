"""Exceptions raised when the AForm API is misused."""


class AFormError(Exception):
    """Base class for AForm contract violations."""


class NoEventError(AFormError):
    """Raised when an entry point is called with no field event bound."""

    def __init__(self, function_name: str):
        super().__init__(
            f"{function_name} called without a field event; "
            f"pass event= or use AForm.dispatch()"
        )
        self.function_name = function_name
