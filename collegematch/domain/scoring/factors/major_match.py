"""
Major Match Factor

Checks whether the college offers any of the student's preferred majors.
"""

from collegematch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CollegeData,
    FactorResult,
    StudentContext,
)


class MajorMatchFactor(BaseScoringFactor):
    """
    Major availability scoring factor.

    Max: 20 points

    A preferred major matches when it appears, case-insensitively,
    inside any offered major name ("Computer Science" matches
    "Computer Science and Engineering").
    """

    @property
    def name(self) -> str:
        return "major"

    @property
    def max_points(self) -> int:
        return 20

    def evaluate(
        self,
        context: StudentContext,
        college: CollegeData
    ) -> FactorResult:
        offered = [major.lower() for major in college.majors_offered]

        for preferred in context.preferred_majors:
            needle = preferred.lower()
            if any(needle in major for major in offered):
                return FactorResult(
                    points=20,
                    strength="Offers your preferred major(s)",
                )

        return FactorResult(
            points=0,
            concern="May not offer your exact preferred majors",
        )
