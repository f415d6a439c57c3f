"""Validation utilities for die scan calculator inputs - reject, never clamp."""

import math
from dataclasses import fields, replace
from typing import Any, Callable, Dict

from ..models.data_models import Inputs
from ..exceptions.custom_exceptions import InputValidationError


def _to_number(field: str, rule: str, raw: Any) -> float:
    """Convert raw text or number to a finite float."""
    if isinstance(raw, bool):
        raise InputValidationError(field, rule, raw)

    try:
        value = float(str(raw).strip())
    except ValueError:
        raise InputValidationError(field, rule, raw)

    if not math.isfinite(value):
        raise InputValidationError(field, rule, raw)

    return value


def parse_positive_number(field: str, raw: Any) -> float:
    """Parse a finite number > 0."""
    value = _to_number(field, "positive_number", raw)
    if value <= 0:
        raise InputValidationError(field, "positive_number", raw)
    return value


def parse_positive_integer(field: str, raw: Any) -> int:
    """Parse an integer > 0. Integral floats such as '8192.0' are accepted."""
    value = _to_number(field, "positive_integer", raw)
    if not value.is_integer() or value <= 0:
        raise InputValidationError(field, "positive_integer", raw)
    return int(value)


def parse_fraction(field: str, raw: Any) -> float:
    """Parse a fraction in [0, 1)."""
    value = _to_number(field, "fraction", raw)
    if not 0 <= value < 1:
        raise InputValidationError(field, "fraction", raw)
    return value


def parse_non_negative_integer(field: str, raw: Any) -> int:
    """Parse an integer >= 0."""
    value = _to_number(field, "non_negative", raw)
    if not value.is_integer() or value < 0:
        raise InputValidationError(field, "non_negative", raw)
    return int(value)


FIELD_PARSERS: Dict[str, Callable[[str, Any], Any]] = {
    "width_mm": parse_positive_number,
    "length_mm": parse_positive_number,
    "dpi": parse_positive_number,
    "sensor_px": parse_positive_integer,
    "pixel_pitch_um": parse_positive_number,
    "wd_mm": parse_positive_number,
    "speed_mm_s": parse_positive_number,
    "overlap": parse_fraction,
    "cameras": parse_non_negative_integer,
}


def parse_field(field: str, raw: Any) -> Any:
    """
    Parse one raw value for the named Inputs field.

    Raises InputValidationError if the value breaks the field's rule.
    """
    if field not in FIELD_PARSERS:
        raise KeyError(f"Unknown input field: {field}")
    return FIELD_PARSERS[field](field, raw)


def validate_inputs(inputs: Inputs) -> Inputs:
    """
    Validate a complete Inputs value.

    Returns:
        Normalized copy (integer fields as int)

    Raises:
        InputValidationError: On the first field that breaks its rule
    """
    normalized = {
        f.name: parse_field(f.name, getattr(inputs, f.name))
        for f in fields(inputs)
    }
    return replace(inputs, **normalized)
