"""
GPA Fit Factor

Compares the student's GPA with the college's average admitted GPA.
"""

from collegematch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CollegeData,
    FactorResult,
    StudentContext,
)


class GpaFitFactor(BaseScoringFactor):
    """
    GPA scoring factor.

    Max: 30 points

    - GPA >= college average → 30
    - GPA within 0.3 below average → 20
    - Otherwise → 10

    A missing GPA lands in the lowest band, same as a below-average GPA.
    """

    COMPETITIVE_MARGIN = 0.3

    @property
    def name(self) -> str:
        return "gpa"

    @property
    def max_points(self) -> int:
        return 30

    def evaluate(
        self,
        context: StudentContext,
        college: CollegeData
    ) -> FactorResult:
        gpa = context.gpa

        if gpa is not None and gpa >= college.avg_gpa:
            return FactorResult(
                points=30,
                strength="Your GPA meets or exceeds the average",
            )

        if gpa is not None and gpa >= college.avg_gpa - self.COMPETITIVE_MARGIN:
            return FactorResult(points=20, strength="Your GPA is competitive")

        return FactorResult(
            points=10,
            concern="GPA is below average for admitted students",
        )
