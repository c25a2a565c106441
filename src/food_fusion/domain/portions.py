"""Domain models for portion estimates."""

from dataclasses import dataclass
from enum import StrEnum

from food_fusion.domain.fusion import Origin


class FoodClass(StrEnum):
    """Coarse nutrition category used for portion defaults."""

    PROTEIN = "protein"
    STARCH = "starch"
    VEG = "veg"
    LEAFY = "leafy"
    OTHER = "other"


class Confidence(StrEnum):
    """Confidence tier of a portion estimate."""

    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class PortionedItem:
    """Fused item with a gram estimate."""

    name: str
    grams_est: int
    confidence: Confidence
    food_class: FoodClass
    source: Origin
