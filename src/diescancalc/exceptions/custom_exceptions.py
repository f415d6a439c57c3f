"""Custom exceptions for die scan calculator package."""

from typing import Any


class DieScanCalcError(Exception):
    """Base exception for all die scan calculator errors."""
    pass


class ValidationError(DieScanCalcError):
    """Raised when input data validation fails."""
    pass


class InputValidationError(ValidationError):
    """
    Raised when a single input field is rejected.

    The rule name doubles as the localization key for the message shown
    to the operator (positive_number, positive_integer, fraction, non_negative).
    """

    def __init__(self, field: str, rule: str, value: Any):
        self.field = field
        self.rule = rule
        self.value = value
        super().__init__(f"Invalid value for {field}: {value!r} ({rule.replace('_', ' ')})")


class PromptCancelled(DieScanCalcError):
    """
    Raised when the operator aborts interactive prompting.

    Not a failure: the CLI prints a cancelled notice and exits cleanly.
    """
    pass


class ConfigurationError(DieScanCalcError):
    """Raised when settings or locale selection are invalid."""
    pass
