"""Geometry helpers used throughout the sizing, cropping and gesture layers.

All helpers are total over real inputs: degenerate values (NaN, infinities)
propagate into the result instead of raising.
"""

import math

import numpy as np

from ..models import Point, Size


def get_radian_angle(degree_value: float) -> float:
    """Convert ``degree_value`` degrees to radians."""
    return degree_value * math.pi / 180


def rotate_size(width: float, height: float, rotation: float) -> Size:
    """Return the bounding box of a ``width`` x ``height`` rectangle rotated
    by ``rotation`` degrees about its centre."""
    rot_rad = get_radian_angle(rotation)
    with np.errstate(invalid="ignore"):
        cos_t = np.cos(rot_rad)
        sin_t = np.sin(rot_rad)
        return Size(
            width=float(np.abs(cos_t * width) + np.abs(sin_t * height)),
            height=float(np.abs(sin_t * width) + np.abs(cos_t * height)),
        )


def round_half_up(value: float) -> np.float64:
    """Round to the nearest integer, halves towards positive infinity.

    Unlike :func:`round`, ``2.5`` becomes ``3``. Non-finite values pass through.
    """
    return np.floor(np.float64(value) + 0.5)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``.

    When ``lo > hi`` the upper bound wins. NaN in any argument yields NaN.
    """
    return float(np.minimum(hi, np.maximum(lo, value)))


def get_distance_between_points(point_a: Point, point_b: Point) -> float:
    dy = point_a.y - point_b.y
    dx = point_a.x - point_b.x
    return math.sqrt(dy * dy + dx * dx)


def get_rotation_between_points(point_a: Point, point_b: Point) -> float:
    """Angle in degrees of the vector from ``point_a`` to ``point_b``.

    The result lies in ``[-180, 180]``; swapping the points shifts it by 180.
    """
    return math.atan2(point_b.y - point_a.y, point_b.x - point_a.x) * 180 / math.pi


def get_center(point_a: Point, point_b: Point) -> Point:
    """Midpoint of ``point_a`` and ``point_b``."""
    return Point(x=(point_b.x + point_a.x) / 2, y=(point_b.y + point_a.y) / 2)


__all__ = [
    "get_radian_angle",
    "rotate_size",
    "round_half_up",
    "clamp",
    "get_distance_between_points",
    "get_rotation_between_points",
    "get_center",
]
