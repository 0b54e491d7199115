"""Crop box sizing, pan restriction and output area computation."""

from .area import compute_cropped_area, limit_area
from .sizing import get_crop_size, restrict_position, restrict_position_coord

__all__ = [
    "compute_cropped_area",
    "limit_area",
    "get_crop_size",
    "restrict_position",
    "restrict_position_coord",
]
