"""
Die Scan Calculator Package

Sizes a line-scan camera inspection setup: camera count, field of view per
camera, lens focal length and required line rate from object size, target
DPI, sensor geometry, working distance and traverse speed.
"""

__version__ = "1.0.0"
__author__ = "USA Forge Cell Team"

from .core.calculator import compute, review_results, MM_PER_INCH
from .models.data_models import Inputs, Results, Advisory
from .exceptions.custom_exceptions import (
    DieScanCalcError, ValidationError, InputValidationError, PromptCancelled
)

__all__ = [
    "compute",
    "review_results",
    "MM_PER_INCH",
    "Inputs",
    "Results",
    "Advisory",
    "DieScanCalcError",
    "ValidationError",
    "InputValidationError",
    "PromptCancelled"
]
