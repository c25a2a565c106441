"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from food_fusion.domain.portions import FoodClass
from food_fusion.domain.scan import DetectMode
from food_fusion.services.portions import (
    BASE_GRAMS,
    DENSITY_FACTORS,
    MAX_GRAMS,
    MIN_GRAMS,
    PLATE_FULL_GRAMS,
)
from food_fusion.services.similarity import MATCH_THRESHOLD

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from FOOD_FUSION_* environment variables."""

    environment: str = _ENVIRONMENT
    debug: bool = False
    vocabulary_path: Path | None = None
    detect_mode: str = DetectMode.HYBRID.value
    reject_non_food: bool = True
    match_threshold: float = Field(default=MATCH_THRESHOLD, ge=0.0, le=1.0)
    min_grams: int = Field(default=MIN_GRAMS, ge=1)
    max_grams: int = Field(default=MAX_GRAMS, ge=1)
    plate_full_grams: int = Field(default=PLATE_FULL_GRAMS, gt=0)
    base_grams: dict[FoodClass, int] = Field(default_factory=lambda: dict(BASE_GRAMS))
    density_factors: dict[FoodClass, float] = Field(
        default_factory=lambda: dict(DENSITY_FACTORS)
    )

    model_config = SettingsConfigDict(
        env_prefix="FOOD_FUSION_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("base_grams")
    @classmethod
    def _fill_base_grams(cls, value: dict[FoodClass, int]) -> dict[FoodClass, int]:
        merged = {**BASE_GRAMS, **value}
        invalid = sorted(str(key) for key, grams in merged.items() if grams <= 0)
        if invalid:
            raise ValueError(f"base grams must be positive for: {invalid}")
        return merged

    @field_validator("density_factors")
    @classmethod
    def _fill_density_factors(
        cls, value: dict[FoodClass, float]
    ) -> dict[FoodClass, float]:
        merged = {**DENSITY_FACTORS, **value}
        invalid = sorted(str(key) for key, factor in merged.items() if factor <= 0)
        if invalid:
            raise ValueError(f"density factors must be positive for: {invalid}")
        return merged

    @model_validator(mode="after")
    def _check_grams_range(self) -> "Settings":
        if self.min_grams > self.max_grams:
            raise ValueError("min_grams must not exceed max_grams")
        parse_detect_mode(self.detect_mode)
        return self


def parse_detect_mode(raw: str | None) -> DetectMode:
    """Parse a detection mode name such as `HYBRID` or `gpt-only`."""
    if raw is None:
        return DetectMode.HYBRID
    cleaned = raw.strip().lower().replace("-", "_")
    if not cleaned:
        return DetectMode.HYBRID
    try:
        return DetectMode(cleaned)
    except ValueError:
        raise ValueError(f"Unknown detect mode: {raw!r}") from None
