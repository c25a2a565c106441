"""Food class lookup."""

from dataclasses import dataclass, field
from functools import lru_cache

from food_fusion.domain.portions import FoodClass
from food_fusion.services.canonicalizer import Canonicalizer, default_canonicalizer


@dataclass
class FoodClassifier:
    """Classify canonical food keys into coarse nutrition categories."""

    canonicalizer: Canonicalizer
    _index: dict[str, FoodClass] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._index = self.canonicalizer.vocabulary.class_index()

    def classify(self, name: str) -> FoodClass:
        """Return the food class for a name, falling back to its head word."""
        key = self.canonicalizer.canonicalize(name)
        found = self._index.get(key)
        if found is not None:
            return found
        head = key.rsplit(" ", 1)[-1]
        return self._index.get(head, FoodClass.OTHER)


@lru_cache(maxsize=1)
def default_classifier() -> FoodClassifier:
    """Return a shared classifier built from the bundled vocabulary."""
    return FoodClassifier(default_canonicalizer())


def classify_food(name: str) -> FoodClass:
    """Classify a name with the bundled vocabulary."""
    return default_classifier().classify(name)
