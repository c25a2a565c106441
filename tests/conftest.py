"""Shared test fixtures."""

import pytest

from food_fusion.config import Settings
from food_fusion.containers import AppContainer, build_container
from food_fusion.domain.detections import BBox, DetectionSource, RawDetection
from food_fusion.domain.vocabulary import FoodVocabulary, load_vocabulary
from food_fusion.services.canonicalizer import Canonicalizer
from food_fusion.services.classification import FoodClassifier
from food_fusion.services.fusion import FusionMatcher
from food_fusion.services.portions import PortionEstimator


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def vocabulary() -> FoodVocabulary:
    return load_vocabulary()


@pytest.fixture
def canonicalizer(vocabulary: FoodVocabulary) -> Canonicalizer:
    return Canonicalizer(vocabulary)


@pytest.fixture
def matcher(canonicalizer: Canonicalizer) -> FusionMatcher:
    return FusionMatcher(canonicalizer)


@pytest.fixture
def estimator(canonicalizer: Canonicalizer) -> PortionEstimator:
    return PortionEstimator(FoodClassifier(canonicalizer))


@pytest.fixture
def salmon_plate() -> list[RawDetection]:
    """Vision output for a salmon and asparagus plate."""
    return [
        RawDetection(
            name="salmon",
            source=DetectionSource.OBJECT,
            score=0.8,
            bbox=BBox(x=40, y=60, width=200, height=120),
        ),
        RawDetection(
            name="asparagus",
            source=DetectionSource.OBJECT,
            score=0.7,
            bbox=BBox(x=260, y=80, width=150, height=90),
        ),
    ]
