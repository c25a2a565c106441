"""Scan pipeline combining filtering, fusion and portion estimation."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from food_fusion.domain.detections import BBox, ImageSize, RawDetection
from food_fusion.domain.scan import DetectMode, ScanResult
from food_fusion.services.canonicalizer import Canonicalizer
from food_fusion.services.fusion import FusionMatcher
from food_fusion.services.portions import PortionEstimator

_logger = logging.getLogger(__name__)


@dataclass
class ScanService:
    """Turn detector outputs for one photo into portioned food items."""

    canonicalizer: Canonicalizer
    fusion_matcher: FusionMatcher
    portion_estimator: PortionEstimator
    detect_mode: DetectMode = DetectMode.HYBRID
    reject_non_food: bool = True
    debug: bool = False

    def analyze(
        self,
        vision_detections: Sequence[RawDetection],
        text_mentions: Sequence[str],
        plate_bbox: BBox | None = None,
        image_size: ImageSize | None = None,
    ) -> ScanResult:
        """Filter inputs, fuse them and estimate a portion per item."""
        if vision_detections is None or text_mentions is None:
            raise TypeError("vision_detections and text_mentions are required")
        if self.detect_mode is DetectMode.GPT_ONLY:
            vision_detections = []
        if self.detect_mode is DetectMode.VISION_ONLY:
            text_mentions = []

        rejected: list[str] = []
        kept_detections: list[RawDetection] = []
        for detection in vision_detections:
            if self._should_reject(detection.name):
                rejected.append(detection.name)
            else:
                kept_detections.append(detection)
        kept_mentions: list[str] = []
        for mention in text_mentions:
            if not mention.strip():
                continue
            if self._should_reject(mention):
                rejected.append(mention)
            else:
                kept_mentions.append(mention)

        fused = self.fusion_matcher.fuse(kept_detections, kept_mentions)
        items = self.portion_estimator.estimate(fused, plate_bbox, image_size)
        if self.debug:
            _logger.info(
                "Scan analyzed: mode=%s vision=%s text=%s rejected=%s items=%s",
                self.detect_mode,
                len(kept_detections),
                len(kept_mentions),
                rejected,
                [item.name for item in items],
            )
        return ScanResult(items=items, fused=fused, rejected=rejected)

    def is_non_food(self, name: str) -> bool:
        """Return True when the whole name is tableware or packaging.

        Dishes named after their container ("rice bowl", "fruit cup") are kept.
        """
        terms = self.canonicalizer.vocabulary.non_food
        if " ".join(name.lower().split()) in terms:
            return True
        return self.canonicalizer.canonicalize(name) in terms

    def _should_reject(self, name: str) -> bool:
        return self.reject_non_food and self.is_non_food(name)
