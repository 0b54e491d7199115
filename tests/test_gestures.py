"""Tests for the drag, wheel and pinch helpers."""

import math
from dataclasses import replace

import pytest

from cropbox import gestures
from cropbox.models import DEFAULT_SETTINGS, Area, CropperSettings, Point, Size
from cropbox.utils import get_distance_between_points, get_rotation_between_points

IMAGE = Size(1000, 800)
CROP = Size(300, 300)


def test_point_on_container_is_offset_from_centre() -> None:
    container = Area(x=100, y=100, width=200, height=100)
    assert gestures.get_point_on_container(Point(150, 120), container) == Point(50, 30)
    assert gestures.get_point_on_container(Point(200, 150), container) == Point(0, 0)


def test_point_on_media_removes_zoom() -> None:
    assert gestures.get_point_on_media(Point(10, 20), Point(30, 40), 2) == Point(20, 30)


@pytest.mark.parametrize(("zoom", "expected"), [(0.5, 1.0), (2.0, 2.0), (5.0, 3.0)])
def test_clamp_zoom_uses_settings_range(zoom: float, expected: float) -> None:
    assert gestures.clamp_zoom(zoom) == expected


def test_wheel_zoom_follows_speed_and_limits() -> None:
    assert gestures.zoom_from_wheel(2.0, 100) == pytest.approx(1.5)
    assert gestures.zoom_from_wheel(1.0, 100) == 1.0
    assert gestures.zoom_from_wheel(2.0, -100) == pytest.approx(2.5)

    fast = replace(DEFAULT_SETTINGS, zoom_speed=2.0)
    assert gestures.zoom_from_wheel(2.0, -100, fast) == 3.0


def test_pinch_zoom_scales_by_distance_ratio() -> None:
    a, b = Point(0, 0), Point(60, 80)
    distance = get_distance_between_points(a, b)

    assert gestures.pinch_zoom(1.5, 100, distance) == pytest.approx(1.5)
    assert gestures.pinch_zoom(1.5, 100, 150) == pytest.approx(2.25)
    assert gestures.pinch_zoom(2.0, 100, 300) == 3.0


def test_pinch_rotation_adds_angle_delta() -> None:
    last = get_rotation_between_points(Point(0, 0), Point(1, 0))
    current = get_rotation_between_points(Point(0, 0), Point(1, 1))
    assert gestures.pinch_rotation(10, last, current) == pytest.approx(55)


def test_drag_position_follows_pointer() -> None:
    position = gestures.drag_position(
        Point(0, 0), Point(100, 100), Point(150, 80), IMAGE, CROP, 1
    )
    assert position == Point(50, -20)


def test_drag_position_is_restricted() -> None:
    position = gestures.drag_position(
        Point(0, 0), Point(100, 100), Point(1000, 100), IMAGE, CROP, 1
    )
    assert position == Point(350, 0)


def test_drag_position_unrestricted() -> None:
    free = CropperSettings(restrict_position=False)
    position = gestures.drag_position(
        Point(0, 0), Point(100, 100), Point(1000, 100), IMAGE, CROP, 1, settings=free
    )
    assert position == Point(900, 0)


def test_zoom_with_point_at_centre_scales_position() -> None:
    zoom, position = gestures.zoom_with_point(
        Point(0, 0), Point(10, 20), 1.0, 2.0, IMAGE, CROP
    )
    assert zoom == 2.0
    assert position == Point(20, 40)


def test_zoom_with_point_keeps_point_fixed() -> None:
    point = Point(40, -30)
    crop = Point(10, 20)
    zoom, position = gestures.zoom_with_point(point, crop, 1.0, 2.0, IMAGE, CROP)

    before = gestures.get_point_on_media(point, crop, 1.0)
    after = gestures.get_point_on_media(point, position, zoom)
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_zoom_with_point_clamps_zoom_and_position() -> None:
    zoom, position = gestures.zoom_with_point(
        Point(0, 0), Point(900, 0), 1.0, 10.0, IMAGE, CROP
    )
    assert zoom == 3.0
    # (1000 * 3 - 300) / 2
    assert position == Point(1350, 0)


def test_point_on_media_with_zero_zoom_is_non_finite() -> None:
    point = gestures.get_point_on_media(Point(1, 1), Point(0, 0), 0)
    assert math.isinf(point.x)
    assert math.isinf(point.y)

    origin = gestures.get_point_on_media(Point(0, 0), Point(0, 0), 0)
    assert math.isnan(origin.x)


def test_pinch_zoom_with_zero_last_distance_does_not_raise() -> None:
    # inf is clamped to the zoom range, NaN passes through the clamp
    assert gestures.pinch_zoom(1.5, 0, 10) == 3.0
    assert math.isnan(gestures.pinch_zoom(1.5, 0, 0))


def test_zoom_with_point_from_zero_zoom_does_not_raise() -> None:
    zoom, position = gestures.zoom_with_point(
        Point(1, 1), Point(0, 0), 0, 2.0, IMAGE, CROP
    )
    assert zoom == 2.0
    assert position == Point(850, 650)

    free = CropperSettings(restrict_position=False)
    _, loose = gestures.zoom_with_point(
        Point(1, 1), Point(0, 0), 0, 2.0, IMAGE, CROP, settings=free
    )
    assert math.isinf(loose.x)


def test_drag_position_defaults_to_settings_rotation() -> None:
    turned = CropperSettings(rotation=90)
    position = gestures.drag_position(
        Point(0, 0),
        Point(0, 0),
        Point(1000, 1000),
        Size(1000, 500),
        CROP,
        1,
        settings=turned,
    )
    assert position.x == pytest.approx(100)
    assert position.y == pytest.approx(350)

    explicit = gestures.drag_position(
        Point(0, 0),
        Point(0, 0),
        Point(1000, 1000),
        Size(1000, 500),
        CROP,
        1,
        0,
        settings=turned,
    )
    assert explicit == Point(350, 100)


def test_fit_crop_size_uses_settings_aspect_and_rotation() -> None:
    default = gestures.fit_crop_size(Size(1000, 800), Size(500, 500))
    assert default.width == 500
    assert default.height == pytest.approx(375)

    square = CropperSettings(aspect=1.0)
    assert gestures.fit_crop_size(Size(1000, 800), Size(500, 500), square) == Size(
        500, 500
    )

    turned = CropperSettings(aspect=1.0, rotation=90)
    size = gestures.fit_crop_size(Size(1000, 500), Size(2000, 2000), turned)
    assert size.width == pytest.approx(500)
    assert size.height == pytest.approx(500)
