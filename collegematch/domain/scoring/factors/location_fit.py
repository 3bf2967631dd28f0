"""
Location Fit Factor

Matches the student's preferred locations against the college's state and city.
"""

from collegematch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CollegeData,
    FactorResult,
    StudentContext,
)


class LocationFitFactor(BaseScoringFactor):
    """
    Location preference scoring factor.

    Max: 10 points

    - No stated preference → flat 5 (neutral)
    - A preferred location found in the college state or city → 10
    - Stated preferences, none matching → 0
    """

    NEUTRAL_POINTS = 5

    @property
    def name(self) -> str:
        return "location"

    @property
    def max_points(self) -> int:
        return 10

    def evaluate(
        self,
        context: StudentContext,
        college: CollegeData
    ) -> FactorResult:
        if not context.preferred_locations:
            return FactorResult(points=self.NEUTRAL_POINTS)

        places = [
            place.lower()
            for place in (college.state, college.city)
            if place
        ]

        for location in context.preferred_locations:
            needle = location.lower()
            if any(needle in place for place in places):
                return FactorResult(
                    points=10,
                    strength="Located in your preferred area",
                )

        return FactorResult(points=0)
