"""Exceptions raised by the PowerPath engine."""


class PowerPathError(Exception):
    """Base class for PowerPath errors."""


class QuestionPoolError(PowerPathError, ValueError):
    """
    Raised when guiding/quiz pools violate structural invariants.

    Attributes:
        errors: Individual problems found in the pools
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or []
        if self.errors:
            message = message + ":\n" + "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(message)
