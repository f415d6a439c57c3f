"""Utility functions and helpers."""

from .validation import FIELD_PARSERS, parse_field, validate_inputs
from .logging_utils import setup_logger

__all__ = ["FIELD_PARSERS", "parse_field", "validate_inputs", "setup_logger"]
