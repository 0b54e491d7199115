"""Crop box sizing and pan restriction for the interactive cropper."""

from __future__ import annotations

import numpy as np

from ..models import Point, Size
from ..utils import rotate_size


def get_crop_size(
    img_width: float,
    img_height: float,
    container_width: float,
    container_height: float,
    aspect: float,
    rotation: float = 0,
) -> Size:
    """Compute the crop box for a media of the given size inside a container.

    The box keeps ``aspect`` and never exceeds either the rotated media
    footprint or the container on any axis.
    """
    rotated = rotate_size(img_width, img_height, rotation)
    fitting_width = float(np.minimum(rotated.width, container_width))
    fitting_height = float(np.minimum(rotated.height, container_height))

    if fitting_width > fitting_height * aspect:
        return Size(width=fitting_height * aspect, height=fitting_height)

    # zero aspect yields inf/NaN here, never ZeroDivisionError
    with np.errstate(divide="ignore", invalid="ignore"):
        height = float(np.float64(fitting_width) / aspect)
    return Size(width=fitting_width, height=height)


def restrict_position_coord(
    position: float, image_size: float, crop_size: float, zoom: float
) -> float:
    """Limit one axis of the media offset so the crop box stays covered."""
    max_position = image_size * zoom / 2 - crop_size / 2

    # Below zoom 1 the media is smaller than the crop box: keep it inside instead
    if zoom < 1:
        max_position = crop_size / 2 - image_size * zoom / 2

    return float(np.minimum(max_position, np.maximum(position, -max_position)))


def restrict_position(
    position: Point,
    image_size: Size,
    crop_size: Size,
    zoom: float,
    rotation: float = 0,
) -> Point:
    """Ensure a requested media position keeps the crop area filled."""
    rotated = rotate_size(image_size.width, image_size.height, rotation)
    return Point(
        x=restrict_position_coord(position.x, rotated.width, crop_size.width, zoom),
        y=restrict_position_coord(position.y, rotated.height, crop_size.height, zoom),
    )


__all__ = ["get_crop_size", "restrict_position", "restrict_position_coord"]
