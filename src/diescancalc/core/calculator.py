"""
Line-scan sizing calculation.

Maps one set of physical setup parameters to camera count, field of view,
lens focal length and line rate with closed-form formulas. The functions in
this module never validate their inputs; callers pass an already validated
Inputs (see utils.validation).
"""

import math
from typing import List

from ..models.data_models import Inputs, Results, Advisory

MM_PER_INCH = 25.4

# Magnification outside this band is hard to source optics for
MIN_COMFORTABLE_MAGNIFICATION = 0.1
MAX_COMFORTABLE_MAGNIFICATION = 10.0

# Recommended camera line rate as a multiple of the required rate
LINE_RATE_HEADROOM = 2.0


def compute(inputs: Inputs) -> Results:
    """
    Compute line-scan sizing results.

    Args:
        inputs: Validated setup parameters

    Returns:
        Results derived from inputs; identical inputs give identical results
    """
    # Sample size on the object from requested dpi
    pixel_size_obj_mm = MM_PER_INCH / inputs.dpi

    # Pixels across the full width, then inflated for stitching margin
    px_needed_across = inputs.width_mm / pixel_size_obj_mm
    px_needed_with_margin = px_needed_across * (1 + inputs.overlap)

    # Each camera loses the overlap fraction of its pixels to its neighbour.
    # Simple symmetric approximation, always rounded up to a whole camera.
    cams_required = math.ceil(
        px_needed_with_margin / (inputs.sensor_px * (1 - inputs.overlap))
    )

    cams_used = inputs.cameras if inputs.cameras > 0 else cams_required
    usable_px_per_cam = inputs.sensor_px

    fov_per_cam_mm = (inputs.width_mm * (1 + inputs.overlap)) / cams_used

    sensor_length_mm = inputs.sensor_px * (inputs.pixel_pitch_um / 1000)
    magnification = sensor_length_mm / fov_per_cam_mm

    # Thin lens approx: f = (M * WD) / (1 + M)
    focal_length_mm = (magnification * inputs.wd_mm) / (1 + magnification)

    # Square sampling: line pitch along travel equals cross-track pixel size
    line_pitch_mm = pixel_size_obj_mm
    lines_needed = inputs.length_mm / line_pitch_mm
    line_rate_hz = inputs.speed_mm_s / line_pitch_mm

    eq_dpi = MM_PER_INCH / pixel_size_obj_mm

    return Results(
        pixel_size_obj_mm=pixel_size_obj_mm,
        eq_dpi=eq_dpi,
        px_needed_across=px_needed_across,
        px_needed_with_margin=px_needed_with_margin,
        usable_px_per_cam=usable_px_per_cam,
        cams_required=cams_required,
        cams_used=cams_used,
        fov_per_cam_mm=fov_per_cam_mm,
        sensor_length_mm=sensor_length_mm,
        magnification=magnification,
        focal_length_mm=focal_length_mm,
        line_pitch_mm=line_pitch_mm,
        lines_needed=lines_needed,
        line_rate_hz=line_rate_hz,
    )


def review_results(inputs: Inputs, results: Results) -> List[Advisory]:
    """Return non-fatal advisories for a finished calculation."""
    advisories = []

    if 0 < inputs.cameras < results.cams_required:
        advisories.append(Advisory(
            code="cameras_below_required",
            message=(
                f"Planned cameras ({inputs.cameras}) below required "
                f"({results.cams_required}) - width coverage falls short"
            ),
            level="warning",
        ))

    if not MIN_COMFORTABLE_MAGNIFICATION <= results.magnification <= MAX_COMFORTABLE_MAGNIFICATION:
        advisories.append(Advisory(
            code="magnification_out_of_range",
            message=(
                f"Magnification {results.magnification:.4f} outside "
                f"{MIN_COMFORTABLE_MAGNIFICATION}-{MAX_COMFORTABLE_MAGNIFICATION}, "
                f"lens selection may be difficult"
            ),
        ))

    advisories.append(Advisory(
        code="line_rate_headroom",
        message=(
            f"Select a camera rated for at least "
            f"{results.line_rate_hz * LINE_RATE_HEADROOM:.0f} Hz line rate"
        ),
    ))

    return advisories
