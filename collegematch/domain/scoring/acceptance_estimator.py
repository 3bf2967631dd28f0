"""
Acceptance Estimator

Maps a match score and a college's historical acceptance rate
to a qualitative acceptance probability tier.
"""

from typing import Optional

from collegematch.domain.scoring.interfaces import AcceptanceProbability


class AcceptanceEstimator:
    """
    Acceptance probability estimator.

    adjusted = min(acceptance_rate * (match_score / 70), 95)

    A match score above 70 amplifies the raw acceptance rate,
    a score below 70 dampens it.

    Tiers:
    - adjusted >= 70 → High
    - adjusted >= 40 → Moderate
    - adjusted >= 15 → Low
    - otherwise → Very Low
    """

    NORMALIZATION_SCORE = 70
    PROBABILITY_CAP = 95.0

    HIGH_THRESHOLD = 70
    MODERATE_THRESHOLD = 40
    LOW_THRESHOLD = 15

    def adjusted_probability(
        self,
        match_score: int,
        acceptance_rate: Optional[float]
    ) -> float:
        """Return the adjusted probability on a 0-95 scale."""
        # Unknown acceptance rate gives no evidence of admission
        base_rate = acceptance_rate if acceptance_rate is not None else 0.0
        adjusted = base_rate * (match_score / self.NORMALIZATION_SCORE)
        return min(adjusted, self.PROBABILITY_CAP)

    def estimate(
        self,
        match_score: int,
        acceptance_rate: Optional[float]
    ) -> AcceptanceProbability:
        adjusted = self.adjusted_probability(match_score, acceptance_rate)

        if adjusted >= self.HIGH_THRESHOLD:
            return AcceptanceProbability.HIGH
        if adjusted >= self.MODERATE_THRESHOLD:
            return AcceptanceProbability.MODERATE
        if adjusted >= self.LOW_THRESHOLD:
            return AcceptanceProbability.LOW
        return AcceptanceProbability.VERY_LOW
