"""
Budget Fit Factor

Compares out-of-state tuition with the student's maximum budget.
"""

from collegematch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CollegeData,
    FactorResult,
    StudentContext,
)


class BudgetFitFactor(BaseScoringFactor):
    """
    Affordability scoring factor.

    Max: 10 points

    - No budget given, or tuition unknown → 5 (neutral)
    - Tuition within budget → 10
    - Tuition over budget → 3

    A budget of 0 is a real budget, not a missing one.
    """

    NEUTRAL_POINTS = 5

    @property
    def name(self) -> str:
        return "budget"

    @property
    def max_points(self) -> int:
        return 10

    def evaluate(
        self,
        context: StudentContext,
        college: CollegeData
    ) -> FactorResult:
        if context.budget_max is None or college.tuition_out_state is None:
            return FactorResult(points=self.NEUTRAL_POINTS)

        if college.tuition_out_state <= context.budget_max:
            return FactorResult(
                points=10,
                strength="Tuition fits within your budget",
            )

        return FactorResult(
            points=3,
            concern="Tuition may exceed your budget (scholarships available)",
        )
