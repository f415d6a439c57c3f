"""Configuration management for die scan calculator package."""

import os

from ..models.data_models import Inputs
from ..i18n.bundles import BUNDLES
from ..exceptions.custom_exceptions import ConfigurationError, ValidationError
from ..utils.validation import validate_inputs

# Reference setup: 1200 mm die, 250 dpi, 8k line-scan sensor
DEFAULT_INPUTS = Inputs(
    width_mm=1200.0,
    length_mm=1200.0,
    dpi=250.0,
    sensor_px=8192,
    pixel_pitch_um=7.0,
    wd_mm=600.0,
    speed_mm_s=200.0,
    overlap=0.12,
    cameras=0,
)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings:
    """
    Runtime settings for the calculator CLI.

    Environment only tunes logging and the default language; calculation
    inputs always come from flags or prompts.
    """

    def __init__(self):
        # Logging settings
        self.log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

        # Locale settings
        self.default_lang: str = os.getenv("DEFAULT_LANG", "en").lower()

        # Calculation defaults
        self.defaults: Inputs = DEFAULT_INPUTS

    def validate_settings(self) -> bool:
        """Validate all settings before running a calculation."""
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Log level must be one of {VALID_LOG_LEVELS}, got '{self.log_level}'"
            )

        if self.default_lang not in BUNDLES:
            raise ConfigurationError(
                f"Default language must be one of {sorted(BUNDLES)}, got '{self.default_lang}'"
            )

        try:
            validate_inputs(self.defaults)
        except ValidationError as e:
            raise ConfigurationError(f"Default inputs invalid: {e}")

        return True
