"""Exceptions signalling programming errors in the calculator core.

Expected invalid user input is never raised; it is returned as an
``Invalid`` value from :mod:`macro_calculator.domain.validation`.
"""


class MacroCalculatorError(Exception):
    """Base exception for calculator errors."""


class UnreachableStateError(MacroCalculatorError):
    """Raised when a value carries a tag no branch handles."""

    def __init__(self, value: object):
        super().__init__(f"Unhandled variant: {value!r}")
        self.value = value


class InvalidBodyFatPercentageError(MacroCalculatorError, ValueError):
    """Raised when a derivation is asked for an unusable body fat percentage."""

    def __init__(self, percentage: float):
        super().__init__(
            f"Body fat percentage must be in [0, 100) for this derivation, "
            f"got {percentage}"
        )
        self.percentage = percentage


class InvalidInputError(MacroCalculatorError):
    """Raised when an invalid validation result is unwrapped."""

    def __init__(self, errors: tuple[object, ...]):
        super().__init__("; ".join(str(error) for error in errors))
        self.errors = errors
