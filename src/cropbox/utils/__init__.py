"""Low-level geometry primitives."""

from .geometry import (
    clamp,
    get_center,
    get_distance_between_points,
    get_radian_angle,
    get_rotation_between_points,
    rotate_size,
    round_half_up,
)

__all__ = [
    "clamp",
    "get_center",
    "get_distance_between_points",
    "get_radian_angle",
    "get_rotation_between_points",
    "rotate_size",
    "round_half_up",
]
