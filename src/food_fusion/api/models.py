"""Pydantic models for the scan HTTP API."""

from pydantic import BaseModel, Field

from food_fusion.domain.detections import (
    BBox,
    DetectionSource,
    ImageSize,
    RawDetection,
)
from food_fusion.domain.fusion import Origin
from food_fusion.domain.portions import Confidence, FoodClass, PortionedItem


class BBoxPayload(BaseModel):
    """Bounding box in pixel units."""

    x: float
    y: float
    width: float
    height: float

    def to_domain(self) -> BBox:
        """Convert to the domain bounding box."""
        return BBox(x=self.x, y=self.y, width=self.width, height=self.height)


class ImageSizePayload(BaseModel):
    """Source image dimensions."""

    width: int
    height: int

    def to_domain(self) -> ImageSize:
        """Convert to the domain image size."""
        return ImageSize(width=self.width, height=self.height)


class DetectionPayload(BaseModel):
    """Vision detection from the image recognizer."""

    name: str
    source: DetectionSource = DetectionSource.OBJECT
    score: float = Field(default=0.0, ge=0.0, le=1.0)
    bbox: BBoxPayload | None = None

    def to_domain(self) -> RawDetection:
        """Convert to the domain detection."""
        return RawDetection(
            name=self.name,
            source=self.source,
            score=self.score,
            bbox=self.bbox.to_domain() if self.bbox else None,
        )


class ScanRequest(BaseModel):
    """Detector outputs and optional plate geometry for one photo."""

    vision: list[DetectionPayload] = Field(default_factory=list)
    text: list[str] = Field(default_factory=list)
    plate_bbox: BBoxPayload | None = None
    image_size: ImageSizePayload | None = None


class PortionedItemPayload(BaseModel):
    """Portioned food item returned to the client."""

    name: str
    grams_est: int
    confidence: Confidence
    food_class: FoodClass
    source: Origin

    @classmethod
    def from_domain(cls, item: PortionedItem) -> "PortionedItemPayload":
        """Build a payload from a domain portioned item."""
        return cls(
            name=item.name,
            grams_est=item.grams_est,
            confidence=item.confidence,
            food_class=item.food_class,
            source=item.source,
        )


class ScanResponse(BaseModel):
    """Scan result payload."""

    items: list[PortionedItemPayload]
    total_grams: int
    rejected: list[str]
