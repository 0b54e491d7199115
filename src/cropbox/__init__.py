"""cropbox: pan/zoom/rotate geometry for interactive image cropping."""

from __future__ import annotations

from ._version import get_version
from .cropping import compute_cropped_area, get_crop_size, restrict_position
from .models import (
    DEFAULT_SETTINGS,
    Area,
    CroppedArea,
    CropperSettings,
    ImageSize,
    Point,
    Size,
)
from .utils import (
    get_center,
    get_distance_between_points,
    get_radian_angle,
    get_rotation_between_points,
    rotate_size,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "get_version",
    "compute_cropped_area",
    "get_crop_size",
    "restrict_position",
    "get_center",
    "get_distance_between_points",
    "get_radian_angle",
    "get_rotation_between_points",
    "rotate_size",
    "Area",
    "CroppedArea",
    "CropperSettings",
    "DEFAULT_SETTINGS",
    "ImageSize",
    "Point",
    "Size",
]
