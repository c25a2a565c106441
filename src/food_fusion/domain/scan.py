"""Domain models for a full scan analysis."""

from dataclasses import dataclass
from enum import StrEnum

from food_fusion.domain.fusion import FusedItem
from food_fusion.domain.portions import PortionedItem


class DetectMode(StrEnum):
    """Which detector outputs take part in a scan."""

    HYBRID = "hybrid"
    VISION_ONLY = "vision_only"
    GPT_ONLY = "gpt_only"


@dataclass(frozen=True)
class ScanResult:
    """Portioned items for one scan plus the intermediate fusion output."""

    items: list[PortionedItem]
    fused: list[FusedItem]
    rejected: list[str]

    @property
    def total_grams(self) -> int:
        """Return the summed gram estimate across items."""
        return sum(item.grams_est for item in self.items)
