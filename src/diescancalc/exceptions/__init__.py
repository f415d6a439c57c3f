"""Custom exception classes for die scan calculator package."""

from .custom_exceptions import (
    DieScanCalcError,
    ValidationError,
    InputValidationError,
    PromptCancelled,
    ConfigurationError
)

__all__ = [
    "DieScanCalcError",
    "ValidationError",
    "InputValidationError",
    "PromptCancelled",
    "ConfigurationError"
]
