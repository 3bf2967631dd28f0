"""
Unit tests for the AcceptanceEstimator and LabelClassifier.
"""

import pytest

from collegematch.domain.scoring import (
    AcceptanceEstimator,
    AcceptanceProbability,
    FitCategory,
    LabelClassifier,
)


@pytest.fixture
def estimator():
    return AcceptanceEstimator()


@pytest.fixture
def classifier():
    return LabelClassifier()


class TestAcceptanceEstimator:

    def test_score_of_70_keeps_raw_rate(self, estimator):
        assert estimator.adjusted_probability(70, 50) == pytest.approx(50)

    def test_high_score_amplifies_rate(self, estimator):
        assert estimator.adjusted_probability(93, 20) == pytest.approx(26.571, abs=1e-3)

    def test_capped_at_95(self, estimator):
        assert estimator.adjusted_probability(100, 90) == 95

    def test_unknown_rate_is_very_low(self, estimator):
        assert estimator.adjusted_probability(100, None) == 0
        assert estimator.estimate(100, None) == AcceptanceProbability.VERY_LOW

    @pytest.mark.parametrize(
        "rate, expected",
        [
            # score 70 leaves the rate unchanged, so rate == adjusted
            (95, AcceptanceProbability.HIGH),
            (70, AcceptanceProbability.HIGH),
            (69.9, AcceptanceProbability.MODERATE),
            (40, AcceptanceProbability.MODERATE),
            (39.9, AcceptanceProbability.LOW),
            (15, AcceptanceProbability.LOW),
            (14.9, AcceptanceProbability.VERY_LOW),
            (0, AcceptanceProbability.VERY_LOW),
        ],
    )
    def test_tier_boundaries(self, estimator, rate, expected):
        assert estimator.estimate(70, rate) == expected

    def test_reference_scenario_is_low(self, estimator):
        assert estimator.estimate(93, 20) == AcceptanceProbability.LOW

    def test_low_score_dampens_rate(self, estimator):
        # 50 * 35 / 70 = 25
        assert estimator.estimate(35, 50) == AcceptanceProbability.LOW


class TestLabelClassifier:

    @pytest.mark.parametrize(
        "score, expected",
        [
            (100, FitCategory.SAFETY),
            (85, FitCategory.SAFETY),
            (84, FitCategory.TARGET),
            (65, FitCategory.TARGET),
            (64, FitCategory.REACH),
            (0, FitCategory.REACH),
        ],
    )
    def test_thresholds(self, classifier, score, expected):
        assert classifier.classify(score) == expected
