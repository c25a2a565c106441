"""Domain models for fused detections."""

from dataclasses import dataclass
from enum import StrEnum

from food_fusion.domain.detections import BBox


class SourceTag(StrEnum):
    """Detector that contributed to a fused item."""

    VISION = "vision"
    GPT = "gpt"


class Origin(StrEnum):
    """Provenance summary of a fused item."""

    VISION = "vision"
    GPT = "gpt"
    BOTH = "both"


@dataclass(frozen=True)
class FusedItem:
    """One physical food item after cross-source deduplication."""

    canonical_name: str
    sources: frozenset[SourceTag]
    bbox: BBox | None = None
    score: float | None = None

    def __post_init__(self) -> None:
        if not self.sources:
            raise ValueError("FusedItem requires at least one source")

    @property
    def origin(self) -> Origin:
        """Return `both` when vision and gpt contributed, else the single tag."""
        if SourceTag.VISION in self.sources and SourceTag.GPT in self.sources:
            return Origin.BOTH
        if SourceTag.VISION in self.sources:
            return Origin.VISION
        return Origin.GPT
