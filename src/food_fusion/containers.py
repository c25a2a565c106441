"""Dependency container wiring for the application."""

from dataclasses import dataclass

from food_fusion.config import Settings, parse_detect_mode
from food_fusion.domain.vocabulary import FoodVocabulary, load_vocabulary
from food_fusion.services.canonicalizer import Canonicalizer
from food_fusion.services.classification import FoodClassifier
from food_fusion.services.fusion import FusionMatcher
from food_fusion.services.portions import PortionEstimator
from food_fusion.services.scan import ScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    vocabulary: FoodVocabulary
    canonicalizer: Canonicalizer
    classifier: FoodClassifier
    fusion_matcher: FusionMatcher
    portion_estimator: PortionEstimator
    scan_service: ScanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    vocabulary = load_vocabulary(resolved_settings.vocabulary_path)
    canonicalizer = Canonicalizer(vocabulary)
    classifier = FoodClassifier(canonicalizer)
    fusion_matcher = FusionMatcher(
        canonicalizer=canonicalizer,
        match_threshold=resolved_settings.match_threshold,
        debug=resolved_settings.debug,
    )
    portion_estimator = PortionEstimator(
        classifier=classifier,
        min_grams=resolved_settings.min_grams,
        max_grams=resolved_settings.max_grams,
        plate_full_grams=resolved_settings.plate_full_grams,
        base_grams=dict(resolved_settings.base_grams),
        density_factors=dict(resolved_settings.density_factors),
        debug=resolved_settings.debug,
    )
    scan_service = ScanService(
        canonicalizer=canonicalizer,
        fusion_matcher=fusion_matcher,
        portion_estimator=portion_estimator,
        detect_mode=parse_detect_mode(resolved_settings.detect_mode),
        reject_non_food=resolved_settings.reject_non_food,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        vocabulary=vocabulary,
        canonicalizer=canonicalizer,
        classifier=classifier,
        fusion_matcher=fusion_matcher,
        portion_estimator=portion_estimator,
        scan_service=scan_service,
    )
