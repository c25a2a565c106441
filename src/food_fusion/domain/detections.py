"""Domain models for raw detector input."""

import math
from dataclasses import dataclass
from enum import StrEnum


class DetectionSource(StrEnum):
    """Which recognizer channel produced a vision detection."""

    OBJECT = "object"
    LABEL = "label"


@dataclass(frozen=True)
class BBox:
    """Axis-aligned bounding box in pixel units."""

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        """Return the box area in square pixels."""
        return self.width * self.height

    def is_usable(self) -> bool:
        """Return True when width and height are finite and positive."""
        return _is_positive(self.width) and _is_positive(self.height)


@dataclass(frozen=True)
class ImageSize:
    """Pixel dimensions of the source image."""

    width: int
    height: int

    def is_usable(self) -> bool:
        """Return True when both dimensions are finite and positive."""
        return _is_positive(self.width) and _is_positive(self.height)


@dataclass(frozen=True)
class RawDetection:
    """Single food detection from the image recognizer.

    Label-only detections carry no bounding box. The score is kept for
    reference and does not influence matching or portioning.
    """

    name: str
    source: DetectionSource = DetectionSource.OBJECT
    score: float = 0.0
    bbox: BBox | None = None


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0
