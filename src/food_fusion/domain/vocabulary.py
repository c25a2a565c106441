"""Static food vocabulary loaded from a JSON document."""

import json
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from food_fusion.domain.portions import FoodClass

_MIN_COMPOUND_WORDS = 2

DEFAULT_VOCABULARY_PATH = (
    Path(__file__).resolve().parents[1] / "data" / "food_vocabulary.json"
)


def _normalize(value: str) -> str:
    return " ".join(value.lower().split())


class FoodVocabulary(BaseModel):
    """Lookup tables used by canonicalization, classification and filtering."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    modifiers: frozenset[str] = Field(default_factory=frozenset)
    generic_terms: frozenset[str] = Field(default_factory=frozenset)
    irregular_plurals: dict[str, str] = Field(default_factory=dict)
    invariant_words: frozenset[str] = Field(default_factory=frozenset)
    compounds: tuple[str, ...] = ()
    synonyms: dict[str, str] = Field(default_factory=dict)
    classes: dict[FoodClass, tuple[str, ...]] = Field(default_factory=dict)
    non_food: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("modifiers", "generic_terms", "invariant_words", "non_food")
    @classmethod
    def _normalize_terms(cls, value: frozenset[str]) -> frozenset[str]:
        return frozenset(_normalize(term) for term in value if term.strip())

    @field_validator("irregular_plurals", "synonyms")
    @classmethod
    def _normalize_mapping(cls, value: dict[str, str]) -> dict[str, str]:
        return {_normalize(key): _normalize(target) for key, target in value.items()}

    @field_validator("compounds")
    @classmethod
    def _require_multiword(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        compounds = tuple(_normalize(entry) for entry in value)
        single = [
            entry for entry in compounds if len(entry.split()) < _MIN_COMPOUND_WORDS
        ]
        if single:
            raise ValueError(f"compounds must have two or more words: {single}")
        return compounds

    @model_validator(mode="after")
    def _check_classes(self) -> "FoodVocabulary":
        if FoodClass.OTHER in self.classes:
            raise ValueError("'other' is the fallback class and cannot list foods")
        seen: dict[str, FoodClass] = {}
        for food_class, names in self.classes.items():
            for name in names:
                key = _normalize(name)
                if key in seen and seen[key] != food_class:
                    raise ValueError(
                        f"{key!r} is listed under both {seen[key]} and {food_class}"
                    )
                seen[key] = food_class
        return self

    def class_index(self) -> dict[str, FoodClass]:
        """Return a canonical key to food class mapping."""
        return {
            _normalize(name): food_class
            for food_class, names in self.classes.items()
            for name in names
        }


def load_vocabulary(path: Path | str | None = None) -> FoodVocabulary:
    """Load and validate a vocabulary file, defaulting to the bundled one."""
    if path is None:
        return _default_vocabulary()
    return _read_vocabulary(Path(path))


@lru_cache(maxsize=1)
def _default_vocabulary() -> FoodVocabulary:
    return _read_vocabulary(DEFAULT_VOCABULARY_PATH)


def _read_vocabulary(path: Path) -> FoodVocabulary:
    with path.open(encoding="utf-8") as handle:
        payload = json.load(handle)
    return FoodVocabulary.model_validate(payload)
