"""Logging utilities for die scan calculator package."""

import logging
import sys
from typing import Optional, List

from ..models.data_models import Inputs, Results, Advisory


def setup_logger(name: str, level: str = "WARNING",
                 format_string: Optional[str] = None) -> logging.Logger:
    """
    Setup logger with operator-friendly output.

    Messages go to stderr so report and JSON output on stdout stay clean.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)

    if format_string is None:
        if level.upper() == "DEBUG":
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def log_calculation_start(logger: logging.Logger, inputs: Inputs, interactive: bool) -> None:
    """Log calculation start with the resolved inputs."""
    mode = "interactive" if interactive else "flags"
    logger.info(f"CALCULATION START - inputs resolved from {mode}")
    logger.debug(f"Inputs: {inputs}")


def log_calculation_success(logger: logging.Logger, results: Results) -> None:
    """Log calculation summary."""
    logger.info(
        f"CALCULATION DONE - {results.cams_used} camera(s), "
        f"FOV {results.fov_per_cam_mm:.1f} mm, f {results.focal_length_mm:.1f} mm, "
        f"line rate {results.line_rate_hz:.2f} Hz"
    )


def log_advisories(logger: logging.Logger, advisories: List[Advisory]) -> None:
    """Log advisories at their own level."""
    for advisory in advisories:
        if advisory.level == "warning":
            logger.warning(f"ADVISORY - {advisory.message}")
        else:
            logger.info(f"ADVISORY - {advisory.message}")


def log_cancelled(logger: logging.Logger) -> None:
    """Log operator cancellation."""
    logger.info("PROMPT CANCELLED - no calculation performed")
