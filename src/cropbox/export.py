"""Apply a computed crop area to a decoded image array."""

from __future__ import annotations

import logging
import math

import cv2  # opencv-python
import numpy as np

from .models import Area
from .utils import rotate_size, round_half_up

logger = logging.getLogger(__name__)


def rotate_image(
    image: np.ndarray, rotation: float, border_value: float = 0
) -> np.ndarray:
    """Rotate ``image`` clockwise by ``rotation`` degrees about its centre.

    The canvas grows to the rotated bounding box, so the result has the
    rotated natural size that :func:`cropbox.cropping.compute_cropped_area`
    measures pixels against.
    """
    arr = np.asarray(image)
    if rotation == 0:
        return arr.copy()

    h, w = arr.shape[:2]
    bounds = rotate_size(w, h, rotation)
    new_w = int(round_half_up(bounds.width))
    new_h = int(round_half_up(bounds.height))

    # Pixel-centre convention keeps quarter turns exact
    center = ((w - 1) / 2.0, (h - 1) / 2.0)
    # OpenCV angles are counter-clockwise with the y axis pointing down
    matrix = cv2.getRotationMatrix2D(center, -rotation, 1.0)
    matrix[0, 2] += (new_w - 1) / 2.0 - center[0]
    matrix[1, 2] += (new_h - 1) / 2.0 - center[1]

    logger.debug("rotating %dx%d by %s onto %dx%d", w, h, rotation, new_w, new_h)
    return cv2.warpAffine(
        arr,
        matrix,
        (new_w, new_h),
        flags=cv2.INTER_NEAREST if rotation % 90 == 0 else cv2.INTER_LINEAR,
        borderMode=cv2.BORDER_CONSTANT,
        borderValue=border_value,
    )


def crop_image(
    image: np.ndarray, pixels: Area, rotation: float = 0, border_value: float = 0
) -> np.ndarray:
    """Return the ``pixels`` rectangle of ``image`` rotated by ``rotation``.

    ``pixels`` is the ``cropped_area_pixels`` of a computed crop area. Parts
    of the rectangle outside the rotated canvas, as produced with position
    restriction disabled, are filled with ``border_value``.
    """
    values = (pixels.x, pixels.y, pixels.width, pixels.height)
    if not all(math.isfinite(v) for v in values):
        raise ValueError(f"Crop rectangle must be finite, got {pixels!r}.")

    x0 = int(round_half_up(pixels.x))
    y0 = int(round_half_up(pixels.y))
    width = int(round_half_up(pixels.width))
    height = int(round_half_up(pixels.height))
    if width <= 0 or height <= 0:
        raise ValueError(f"Crop rectangle must have a positive size, got {pixels!r}.")

    rotated = rotate_image(image, rotation, border_value)
    canvas_h, canvas_w = rotated.shape[:2]
    out = np.full((height, width) + rotated.shape[2:], border_value, rotated.dtype)

    # overlap of the rectangle with the canvas, in canvas coordinates
    src_x0, src_y0 = max(x0, 0), max(y0, 0)
    src_x1, src_y1 = min(x0 + width, canvas_w), min(y0 + height, canvas_h)
    if src_x1 > src_x0 and src_y1 > src_y0:
        out[src_y0 - y0 : src_y1 - y0, src_x0 - x0 : src_x1 - x0] = rotated[
            src_y0:src_y1, src_x0:src_x1
        ]
    else:
        logger.debug(
            "crop rectangle %s lies outside the %dx%d canvas",
            pixels,
            canvas_w,
            canvas_h,
        )
    return out


__all__ = ["rotate_image", "crop_image"]
