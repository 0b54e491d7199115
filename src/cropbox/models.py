"""Dataclasses describing crop geometry values and cropper configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

import json


@dataclass(frozen=True)
class Size:
    """Width/height pair in pixels."""

    width: float
    height: float


@dataclass(frozen=True)
class ImageSize:
    """Displayed size of the media plus its natural (source) resolution."""

    width: float
    height: float
    natural_width: float
    natural_height: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Area:
    """Axis-aligned rectangle; ``x``/``y`` is the top-left corner."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class CroppedArea:
    """Result of :func:`cropbox.cropping.compute_cropped_area`."""

    cropped_area_percentages: Area  # of the rotated displayed media, 0..100
    cropped_area_pixels: Area  # on the rotated natural media


@dataclass(frozen=True)
class CropperSettings:
    """Interaction limits shared by the gesture helpers."""

    aspect: float = 4 / 3
    min_zoom: float = 1.0
    max_zoom: float = 3.0
    zoom_speed: float = 1.0
    restrict_position: bool = True
    rotation: float = 0.0

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "CropperSettings":
        data: Dict = json.loads(text)
        return CropperSettings(
            aspect=float(data.get("aspect", 4 / 3)),
            min_zoom=float(data.get("min_zoom", 1.0)),
            max_zoom=float(data.get("max_zoom", 3.0)),
            zoom_speed=float(data.get("zoom_speed", 1.0)),
            restrict_position=bool(data.get("restrict_position", True)),
            rotation=float(data.get("rotation", 0.0)),
        )


DEFAULT_SETTINGS = CropperSettings()


__all__ = [
    "Size",
    "ImageSize",
    "Point",
    "Area",
    "CroppedArea",
    "CropperSettings",
    "DEFAULT_SETTINGS",
]
