"""Gram-weight portion estimation for fused items."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import lru_cache

from food_fusion.domain.detections import BBox, ImageSize
from food_fusion.domain.fusion import FusedItem
from food_fusion.domain.portions import Confidence, FoodClass, PortionedItem
from food_fusion.services.classification import FoodClassifier, default_classifier

MIN_GRAMS = 10
MAX_GRAMS = 600
PLATE_FULL_GRAMS = MAX_GRAMS

BASE_GRAMS: dict[FoodClass, int] = {
    FoodClass.PROTEIN: 135,
    FoodClass.STARCH: 150,
    FoodClass.VEG: 85,
    FoodClass.LEAFY: 50,
    FoodClass.OTHER: 100,
}

DENSITY_FACTORS: dict[FoodClass, float] = {
    FoodClass.PROTEIN: 1.2,
    FoodClass.STARCH: 1.0,
    FoodClass.VEG: 0.8,
    FoodClass.LEAFY: 0.4,
    FoodClass.OTHER: 1.0,
}

_logger = logging.getLogger(__name__)


@dataclass
class PortionEstimator:
    """Estimate grams per item from plate geometry or per-class defaults."""

    classifier: FoodClassifier
    min_grams: int = MIN_GRAMS
    max_grams: int = MAX_GRAMS
    plate_full_grams: int = PLATE_FULL_GRAMS
    base_grams: dict[FoodClass, int] = field(
        default_factory=lambda: dict(BASE_GRAMS)
    )
    density_factors: dict[FoodClass, float] = field(
        default_factory=lambda: dict(DENSITY_FACTORS)
    )
    debug: bool = False

    def estimate(
        self,
        items: Sequence[FusedItem],
        plate_bbox: BBox | None = None,
        image_size: ImageSize | None = None,
    ) -> list[PortionedItem]:
        """Return one portioned item per fused item, in input order."""
        plate = _usable_plate(plate_bbox, image_size)
        return [self._estimate_item(item, plate) for item in items]

    def _estimate_item(self, item: FusedItem, plate: BBox | None) -> PortionedItem:
        food_class = self.classifier.classify(item.canonical_name)
        bbox = item.bbox
        if plate is not None and bbox is not None and bbox.is_usable():
            area_ratio = bbox.area / plate.area
            density = self.density_factors.get(food_class, 1.0)
            grams_float = area_ratio * self.plate_full_grams * density
            if math.isfinite(grams_float):
                grams_raw = round(grams_float)
            else:
                grams_raw = self.max_grams
            confidence = Confidence.HIGH
        else:
            grams_raw = self.base_grams.get(food_class, BASE_GRAMS[food_class])
            confidence = Confidence.LOW
        grams = self._clamp(grams_raw)
        if self.debug:
            _logger.info(
                "Portion estimate: name=%s class=%s raw=%s grams=%s confidence=%s",
                item.canonical_name,
                food_class,
                grams_raw,
                grams,
                confidence,
            )
        return PortionedItem(
            name=item.canonical_name,
            grams_est=grams,
            confidence=confidence,
            food_class=food_class,
            source=item.origin,
        )

    def _clamp(self, grams: int) -> int:
        return max(self.min_grams, min(self.max_grams, grams))


def _usable_plate(
    plate_bbox: BBox | None, image_size: ImageSize | None
) -> BBox | None:
    """Return the plate box when plate and image geometry are both valid."""
    if plate_bbox is None or image_size is None:
        return None
    if not plate_bbox.is_usable() or not image_size.is_usable():
        return None
    # Width and height can be positive while their product underflows to 0.
    area = plate_bbox.area
    if not math.isfinite(area) or area <= 0:
        return None
    return plate_bbox


@lru_cache(maxsize=1)
def default_estimator() -> PortionEstimator:
    """Return a shared estimator with the default calibration."""
    return PortionEstimator(default_classifier())


def estimate_portions(
    items: Sequence[FusedItem],
    plate_bbox: BBox | None = None,
    image_size: ImageSize | None = None,
) -> list[PortionedItem]:
    """Estimate portions with the default calibration."""
    return default_estimator().estimate(items, plate_bbox, image_size)
