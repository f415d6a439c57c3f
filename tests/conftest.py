"""Shared fixtures for die scan calculator tests."""

import pytest

from diescancalc.models.data_models import Inputs


@pytest.fixture
def reference_inputs() -> Inputs:
    """Documented example setup with two planned cameras."""
    return Inputs(
        width_mm=1200.0,
        length_mm=1200.0,
        dpi=250.0,
        sensor_px=8192,
        pixel_pitch_um=7.0,
        wd_mm=600.0,
        speed_mm_s=200.0,
        overlap=0.12,
        cameras=2,
    )
