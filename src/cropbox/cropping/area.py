"""Translate the cropper's pan/zoom/rotation state into the output crop area.

Percentages describe the crop box footprint on the rotated *displayed*
media, independently per axis. Pixels describe the exported rectangle on the
rotated *natural* media and are corrected to the requested aspect ratio.
"""

from __future__ import annotations

import logging

import numpy as np

from ..models import Area, CroppedArea, ImageSize, Point, Size
from ..utils import rotate_size, round_half_up

logger = logging.getLogger(__name__)


def limit_area(
    max_value: float, value: float, should_round: bool = False
) -> np.float64:
    """Ensure the returned value is between ``0`` and ``max_value``."""
    v = round_half_up(value) if should_round else np.float64(value)
    return np.minimum(max_value, np.maximum(0, v))


def _no_op(
    max_value: float, value: float, should_round: bool = False
) -> np.float64:
    return np.float64(value)


def compute_cropped_area(
    crop: Point,
    img_size: ImageSize,
    crop_size: Size,
    aspect: float,
    zoom: float,
    rotation: float = 0,
    restrict_position: bool = True,
) -> CroppedArea:
    """Compute the output cropped area of the media in percentages and pixels.

    ``crop`` is the offset of the media centre from the crop box centre, in
    displayed pixels. ``x``/``y`` of both returned rectangles are top-left
    coordinates on the rotated media.

    With ``restrict_position`` disabled nothing is clamped and the pixel size
    taken from the percentages is not rounded, so values may be negative,
    fractional or exceed the media bounds.

    ``zoom == 0`` or ``aspect == 0`` produce inf/NaN in the result rather than
    an exception.
    """
    limit_area_fn = limit_area if restrict_position else _no_op
    rotated_img_size = rotate_size(img_size.width, img_size.height, rotation)
    rotated_natural_size = rotate_size(
        img_size.natural_width, img_size.natural_height, rotation
    )

    img_w = np.float64(rotated_img_size.width)
    img_h = np.float64(rotated_img_size.height)
    natural_w = np.float64(rotated_natural_size.width)
    natural_h = np.float64(rotated_natural_size.height)
    crop_w = np.float64(crop_size.width)
    crop_h = np.float64(crop_size.height)
    crop_x = np.float64(crop.x)
    crop_y = np.float64(crop.y)
    zoom = np.float64(zoom)
    aspect = np.float64(aspect)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        pct_x = limit_area_fn(
            100, ((img_w - crop_w / zoom) / 2 - crop_x / zoom) / img_w * 100
        )
        pct_y = limit_area_fn(
            100, ((img_h - crop_h / zoom) / 2 - crop_y / zoom) / img_h * 100
        )
        pct_width = limit_area_fn(100, crop_w / img_w * 100 / zoom)
        pct_height = limit_area_fn(100, crop_h / img_h * 100 / zoom)

        width_in_pixels = limit_area_fn(
            natural_w, pct_width * natural_w / 100, True
        )
        height_in_pixels = limit_area_fn(
            natural_h, pct_height * natural_h / 100, True
        )
        is_img_wider_than_high = natural_w >= natural_h * aspect

        if is_img_wider_than_high:
            pixels_w = round_half_up(height_in_pixels * aspect)
            pixels_h = height_in_pixels
        else:
            pixels_w = width_in_pixels
            pixels_h = round_half_up(width_in_pixels / aspect)

        pixels_x = limit_area_fn(
            natural_w - pixels_w, pct_x * natural_w / 100, True
        )
        pixels_y = limit_area_fn(
            natural_h - pixels_h, pct_y * natural_h / 100, True
        )

    result = CroppedArea(
        cropped_area_percentages=Area(
            x=float(pct_x),
            y=float(pct_y),
            width=float(pct_width),
            height=float(pct_height),
        ),
        cropped_area_pixels=Area(
            x=float(pixels_x),
            y=float(pixels_y),
            width=float(pixels_w),
            height=float(pixels_h),
        ),
    )
    logger.debug(
        "cropped area zoom=%s rotation=%s aspect=%s -> %s",
        zoom,
        rotation,
        aspect,
        result.cropped_area_pixels,
    )
    return result


__all__ = ["compute_cropped_area", "limit_area"]
