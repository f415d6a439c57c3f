"""Tests for the line-scan sizing formulas."""

import math
from dataclasses import replace

import pytest

from diescancalc.core.calculator import compute, review_results, MM_PER_INCH


def test_reference_scenario(reference_inputs):
    res = compute(reference_inputs)

    assert res.pixel_size_obj_mm == pytest.approx(0.1016)
    assert res.px_needed_across == pytest.approx(11811.02, abs=0.01)
    assert res.px_needed_with_margin == pytest.approx(13228.35, abs=0.01)
    assert res.cams_required == 2
    assert isinstance(res.cams_required, int)
    assert res.fov_per_cam_mm == pytest.approx(672.0)
    assert res.sensor_length_mm == pytest.approx(57.344)
    assert res.magnification == pytest.approx(0.085333, rel=1e-4)
    assert res.focal_length_mm == pytest.approx(47.17, abs=0.01)
    assert res.line_pitch_mm == pytest.approx(0.1016)
    assert res.lines_needed == pytest.approx(11811.02, abs=0.01)
    assert res.line_rate_hz == pytest.approx(1968.50, abs=0.01)
    assert res.usable_px_per_cam == 8192


@pytest.mark.parametrize("dpi", [1.0, 72.0, 250.0, 300.0, 1200.0, 4800.0, 0.37])
def test_eq_dpi_round_trips(reference_inputs, dpi):
    res = compute(replace(reference_inputs, dpi=dpi))
    assert res.eq_dpi == pytest.approx(dpi, rel=1e-9)
    assert res.pixel_size_obj_mm == pytest.approx(MM_PER_INCH / dpi)


def test_wider_object_never_needs_fewer_pixels_or_cameras(reference_inputs):
    previous = None
    for width in [10.0, 100.0, 500.0, 1200.0, 2500.0, 5000.0, 12000.0]:
        res = compute(replace(reference_inputs, width_mm=width))
        if previous is not None:
            assert res.px_needed_across >= previous.px_needed_across
            assert res.px_needed_with_margin >= previous.px_needed_with_margin
            assert res.cams_required >= previous.cams_required
        previous = res


@pytest.mark.parametrize("width, dpi, sensor_px, overlap", [
    (1200.0, 250.0, 8192, 0.12),
    (300.0, 600.0, 4096, 0.0),
    (2500.0, 400.0, 16384, 0.3),
    (50.0, 100.0, 2048, 0.05),
    (1000.0, 1000.0, 1024, 0.9),
])
def test_cams_required_is_ceiling(reference_inputs, width, dpi, sensor_px, overlap):
    inputs = replace(reference_inputs, width_mm=width, dpi=dpi,
                     sensor_px=sensor_px, overlap=overlap)
    res = compute(inputs)
    exact = res.px_needed_with_margin / (sensor_px * (1 - overlap))

    assert isinstance(res.cams_required, int)
    assert exact <= res.cams_required < exact + 1


def test_user_camera_count_overrides_fov(reference_inputs):
    res = compute(replace(reference_inputs, cameras=5))

    assert res.cams_required == 2
    assert res.cams_used == 5
    assert res.fov_per_cam_mm == pytest.approx(1200.0 * 1.12 / 5)
    assert res.magnification == pytest.approx(res.sensor_length_mm / res.fov_per_cam_mm)


def test_zero_cameras_falls_back_to_required(reference_inputs):
    res = compute(replace(reference_inputs, cameras=0))

    assert res.cams_used == res.cams_required
    assert res.fov_per_cam_mm == (1200.0 * (1 + 0.12)) / res.cams_required


def test_zero_overlap_uses_plain_pixel_count(reference_inputs):
    res = compute(replace(reference_inputs, overlap=0.0, cameras=0))

    assert res.px_needed_with_margin == res.px_needed_across
    assert res.cams_required == math.ceil(res.px_needed_across / 8192)


def test_identical_inputs_give_identical_results(reference_inputs):
    assert compute(reference_inputs) == compute(reference_inputs)


def test_thin_lens_form_is_preserved(reference_inputs):
    res = compute(reference_inputs)
    m = res.magnification
    assert res.focal_length_mm == (m * 600.0) / (1 + m)


def test_calculator_does_not_validate(reference_inputs):
    with pytest.raises(ZeroDivisionError):
        compute(replace(reference_inputs, overlap=1.0))


def test_review_flags_camera_shortfall(reference_inputs):
    advisories = review_results(replace(reference_inputs, cameras=1),
                                compute(replace(reference_inputs, cameras=1)))
    codes = {a.code: a for a in advisories}

    assert codes["cameras_below_required"].level == "warning"


def test_review_reports_magnification_and_headroom(reference_inputs):
    advisories = review_results(reference_inputs, compute(reference_inputs))
    codes = {a.code: a for a in advisories}

    assert "cameras_below_required" not in codes
    assert "magnification_out_of_range" in codes
    assert "3937 Hz" in codes["line_rate_headroom"].message


def test_review_quiet_for_comfortable_magnification(reference_inputs):
    inputs = replace(reference_inputs, pixel_pitch_um=14.0, cameras=4)
    codes = [a.code for a in review_results(inputs, compute(inputs))]
    assert codes == ["line_rate_headroom"]
