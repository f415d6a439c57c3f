"""Data models for die scan calculator package."""

from dataclasses import dataclass, fields
from typing import Dict, Any


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _camel_dict(instance) -> Dict[str, Any]:
    return {_camel(f.name): getattr(instance, f.name) for f in fields(instance)}


@dataclass(frozen=True)
class Inputs:
    """Physical setup parameters for one line-scan sizing run."""
    width_mm: float  # object width to cover
    length_mm: float  # object length along scan direction
    dpi: float  # target sampling density on object
    sensor_px: int  # sensor pixels across width
    pixel_pitch_um: float  # sensor pixel pitch
    wd_mm: float  # working distance lens -> object
    speed_mm_s: float  # traverse speed
    overlap: float  # total overlap fraction, 0.12 = 12%
    cameras: int = 0  # 0 = auto

    def to_dict(self) -> Dict[str, Any]:
        """Return camelCase mapping for JSON output."""
        return _camel_dict(self)


@dataclass(frozen=True)
class Results:
    """Derived optical and sampling parameters."""
    pixel_size_obj_mm: float
    eq_dpi: float
    px_needed_across: float
    px_needed_with_margin: float
    usable_px_per_cam: int
    cams_required: int
    cams_used: int
    fov_per_cam_mm: float
    sensor_length_mm: float
    magnification: float
    focal_length_mm: float
    line_pitch_mm: float
    lines_needed: float
    line_rate_hz: float

    def to_dict(self) -> Dict[str, Any]:
        """Return camelCase mapping for JSON output."""
        return _camel_dict(self)


@dataclass(frozen=True)
class Advisory:
    """Non-fatal note about a finished calculation."""
    code: str  # 'cameras_below_required', 'magnification_out_of_range', 'line_rate_headroom'
    message: str
    level: str = "info"  # 'info' or 'warning'

    def __post_init__(self):
        valid_levels = ['info', 'warning']
        if self.level not in valid_levels:
            raise ValueError(f"Advisory level must be one of {valid_levels}")
