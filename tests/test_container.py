"""Tests for container wiring."""

from food_fusion.config import Settings
from food_fusion.containers import build_container
from food_fusion.domain.scan import DetectMode


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.scan_service is not None
    assert container.scan_service.fusion_matcher is container.fusion_matcher
    assert container.scan_service.detect_mode is DetectMode.HYBRID
    assert container.portion_estimator.base_grams == settings.base_grams


def test_build_container_applies_calibration(settings: Settings) -> None:
    tuned = settings.model_copy(
        update={"match_threshold": 0.8, "max_grams": 400, "debug": True}
    )

    container = build_container(tuned)

    assert container.fusion_matcher.match_threshold == 0.8
    assert container.fusion_matcher.debug is True
    assert container.portion_estimator.max_grams == 400
