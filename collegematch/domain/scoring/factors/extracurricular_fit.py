"""
Extracurricular Factor

Rewards students with a broad activity record.
"""

from collegematch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CollegeData,
    FactorResult,
    StudentContext,
)


class ExtracurricularFactor(BaseScoringFactor):
    """
    Extracurricular scoring factor.

    Max: 5 points, awarded for more than MIN_ACTIVITIES activities.
    Only the number of activities matters, not their content.
    """

    MIN_ACTIVITIES = 3

    @property
    def name(self) -> str:
        return "extracurriculars"

    @property
    def max_points(self) -> int:
        return 5

    def evaluate(
        self,
        context: StudentContext,
        college: CollegeData
    ) -> FactorResult:
        if len(context.extracurriculars) > self.MIN_ACTIVITIES:
            return FactorResult(
                points=5,
                strength="Strong extracurricular profile",
            )
        return FactorResult(points=0)
