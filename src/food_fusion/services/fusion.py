"""Cross-source fusion of vision detections and text mentions."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from food_fusion.domain.detections import RawDetection
from food_fusion.domain.fusion import FusedItem, SourceTag
from food_fusion.services.canonicalizer import Canonicalizer, default_canonicalizer
from food_fusion.services.similarity import MATCH_THRESHOLD, similar

_logger = logging.getLogger(__name__)

_VISION_ONLY = frozenset({SourceTag.VISION})
_GPT_ONLY = frozenset({SourceTag.GPT})
_BOTH = frozenset({SourceTag.VISION, SourceTag.GPT})


@dataclass
class FusionMatcher:
    """Pair vision detections with text mentions that name the same food.

    Pairing is greedy and order-stable: each vision detection, in input
    order, takes the first still-unmatched text mention whose key is equal
    or scores at least `match_threshold`. A text mention is consumed by at
    most one detection.

    A paired item is named by whichever key has more words, so "rice" paired
    with "fried rice" becomes "fried rice". When both keys have the same
    number of words the vision key is kept.
    """

    canonicalizer: Canonicalizer
    match_threshold: float = MATCH_THRESHOLD
    debug: bool = False

    def fuse(
        self,
        vision_detections: Sequence[RawDetection],
        text_mentions: Sequence[str],
    ) -> list[FusedItem]:
        """Return fused items: vision order first, then leftover mentions."""
        vision_keys = [
            self.canonicalizer.canonicalize(detection.name)
            for detection in vision_detections
        ]
        mention_keys = [
            self.canonicalizer.canonicalize(mention) for mention in text_mentions
        ]
        unmatched = list(range(len(mention_keys)))

        fused: list[FusedItem] = []
        for detection, key in zip(vision_detections, vision_keys, strict=True):
            match = self._first_match(key, mention_keys, unmatched)
            if match is None:
                fused.append(
                    FusedItem(
                        canonical_name=key,
                        sources=_VISION_ONLY,
                        bbox=detection.bbox,
                        score=detection.score,
                    )
                )
                continue
            unmatched.remove(match)
            if self.debug:
                _logger.info(
                    "Fusion paired vision=%s with text=%s", key, mention_keys[match]
                )
            fused.append(
                FusedItem(
                    canonical_name=_merged_name(key, mention_keys[match]),
                    sources=_BOTH,
                    bbox=detection.bbox,
                    score=detection.score,
                )
            )

        fused.extend(
            FusedItem(canonical_name=mention_keys[index], sources=_GPT_ONLY)
            for index in unmatched
        )
        if self.debug:
            _logger.info(
                "Fusion result: vision=%s text=%s fused=%s",
                len(vision_keys),
                len(mention_keys),
                len(fused),
            )
        return fused

    def _first_match(
        self, key: str, mention_keys: list[str], unmatched: list[int]
    ) -> int | None:
        for index in unmatched:
            candidate = mention_keys[index]
            if candidate == key:
                return index
            score = similar(key, candidate, self.canonicalizer)
            if score >= self.match_threshold:
                return index
        return None


def _merged_name(vision_key: str, text_key: str) -> str:
    """Prefer the more specific key; ties keep the vision key."""
    if len(text_key.split()) > len(vision_key.split()):
        return text_key
    return vision_key


@lru_cache(maxsize=1)
def default_matcher() -> FusionMatcher:
    """Return a shared matcher built from the bundled vocabulary."""
    return FusionMatcher(default_canonicalizer())


def fuse(
    vision_detections: Sequence[RawDetection], text_mentions: Sequence[str]
) -> list[FusedItem]:
    """Fuse detections and mentions with the bundled vocabulary."""
    return default_matcher().fuse(vision_detections, text_mentions)
