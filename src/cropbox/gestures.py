"""Stateless math behind the cropper's drag, wheel and pinch handlers.

The UI keeps the gesture state (drag start, last pinch distance/angle) and
feeds it back into these helpers on every event.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .cropping import get_crop_size, restrict_position
from .models import DEFAULT_SETTINGS, Area, CropperSettings, Point, Size
from .utils import clamp


def get_point_on_container(point: Point, container_rect: Area) -> Point:
    """Offset of a client ``point`` from the centre of ``container_rect``.

    The sign convention matches the media position: positive values point
    towards the top-left of the container.
    """
    return Point(
        x=container_rect.width / 2 - (point.x - container_rect.x),
        y=container_rect.height / 2 - (point.y - container_rect.y),
    )


def get_point_on_media(point: Point, crop: Point, zoom: float) -> Point:
    """Map a container offset to unzoomed media coordinates."""
    zoom = np.float64(zoom)
    with np.errstate(divide="ignore", invalid="ignore"):
        return Point(
            x=float((point.x + crop.x) / zoom), y=float((point.y + crop.y) / zoom)
        )


def fit_crop_size(
    image_size: Size, container_size: Size, settings: CropperSettings = DEFAULT_SETTINGS
) -> Size:
    """Crop box for the media using the configured aspect and rotation."""
    return get_crop_size(
        image_size.width,
        image_size.height,
        container_size.width,
        container_size.height,
        settings.aspect,
        settings.rotation,
    )


def clamp_zoom(zoom: float, settings: CropperSettings = DEFAULT_SETTINGS) -> float:
    return clamp(zoom, settings.min_zoom, settings.max_zoom)


def _maybe_restrict(
    position: Point,
    image_size: Size,
    crop_size: Size,
    zoom: float,
    rotation: Optional[float],
    settings: CropperSettings,
) -> Point:
    if not settings.restrict_position:
        return position
    if rotation is None:
        rotation = settings.rotation
    return restrict_position(position, image_size, crop_size, zoom, rotation)


def drag_position(
    crop_start: Point,
    drag_start: Point,
    point: Point,
    image_size: Size,
    crop_size: Size,
    zoom: float,
    rotation: Optional[float] = None,
    settings: CropperSettings = DEFAULT_SETTINGS,
) -> Point:
    """New media position while dragging from ``drag_start`` to ``point``.

    ``rotation`` defaults to the rotation in ``settings``.
    """
    requested = Point(
        x=crop_start.x + point.x - drag_start.x,
        y=crop_start.y + point.y - drag_start.y,
    )
    return _maybe_restrict(requested, image_size, crop_size, zoom, rotation, settings)


def zoom_from_wheel(
    zoom: float, delta_y: float, settings: CropperSettings = DEFAULT_SETTINGS
) -> float:
    """Zoom after a wheel event with pixel delta ``delta_y``."""
    return clamp_zoom(zoom - delta_y * settings.zoom_speed / 200, settings)


def pinch_zoom(
    zoom: float,
    last_distance: float,
    distance: float,
    settings: CropperSettings = DEFAULT_SETTINGS,
) -> float:
    """Scale ``zoom`` by the change in distance between the two touches.

    A zero ``last_distance`` gives inf/NaN before clamping, never an error.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.float64(distance) / last_distance
    return clamp_zoom(zoom * float(ratio), settings)


def pinch_rotation(rotation: float, last_angle: float, angle: float) -> float:
    return rotation + angle - last_angle


def zoom_with_point(
    point: Point,
    crop: Point,
    zoom: float,
    new_zoom: float,
    image_size: Size,
    crop_size: Size,
    rotation: Optional[float] = None,
    settings: CropperSettings = DEFAULT_SETTINGS,
) -> Tuple[float, Point]:
    """Zoom to ``new_zoom`` while keeping the media under ``point`` in place.

    ``point`` is a container offset as returned by
    :func:`get_point_on_container`. Returns the clamped zoom and the new
    media position.
    """
    new_zoom = clamp_zoom(new_zoom, settings)
    zoom_target = get_point_on_media(point, crop, zoom)
    requested = Point(
        x=zoom_target.x * new_zoom - point.x,
        y=zoom_target.y * new_zoom - point.y,
    )
    position = _maybe_restrict(
        requested, image_size, crop_size, new_zoom, rotation, settings
    )
    return new_zoom, position


__all__ = [
    "get_point_on_container",
    "get_point_on_media",
    "fit_crop_size",
    "clamp_zoom",
    "drag_position",
    "zoom_from_wheel",
    "pinch_zoom",
    "pinch_rotation",
    "zoom_with_point",
]
