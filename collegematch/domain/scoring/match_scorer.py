"""
Match Scorer

Central scoring engine that adds up all factor points for one
(student, college) pair and explains the result.
"""

from typing import List, Dict, Optional

from collegematch.domain.scoring.interfaces import (
    StudentContext,
    CollegeData,
    MatchResult,
    AIInsights,
    FitCategory,
    ScoringFactor,
)
from collegematch.domain.scoring.factors import (
    GpaFitFactor,
    TestScoreFitFactor,
    MajorMatchFactor,
    LocationFitFactor,
    BudgetFitFactor,
    ExtracurricularFactor,
)
from collegematch.domain.scoring.label_classifier import LabelClassifier
from collegematch.domain.scoring.acceptance_estimator import AcceptanceEstimator


class MatchScorer:
    """
    College match scoring engine.

    Follows Single Responsibility - only calculates scores.
    Uses Strategy pattern for pluggable factors. Pure: holds no
    state that changes between calls.
    """

    MAX_SCORE = 100

    # Strengths quoted in the reasoning text
    REASONING_STRENGTHS = 2

    def __init__(
        self,
        factors: Optional[List[ScoringFactor]] = None,
        classifier: Optional[LabelClassifier] = None,
        estimator: Optional[AcceptanceEstimator] = None,
    ):
        """
        Initialize scorer with factors.

        Args:
            factors: Ordered list of scoring factors. If None, uses defaults;
                an empty list scores every college 0.
        """
        self._factors = self._default_factors() if factors is None else list(factors)
        self._label_classifier = classifier or LabelClassifier()
        self._acceptance_estimator = estimator or AcceptanceEstimator()

    def _default_factors(self) -> List[ScoringFactor]:
        """Get default scoring factors in reporting order."""
        return [
            GpaFitFactor(),
            TestScoreFitFactor(),
            MajorMatchFactor(),
            LocationFitFactor(),
            BudgetFitFactor(),
            ExtracurricularFactor(),
        ]

    @property
    def factors(self) -> List[ScoringFactor]:
        return list(self._factors)

    def score_college(
        self,
        context: StudentContext,
        college: CollegeData
    ) -> MatchResult:
        """
        Score a single college for the student.

        Args:
            context: Student profile context
            college: College catalog entry

        Returns:
            MatchResult with score, category, notes and insights
        """
        strengths: List[str] = []
        concerns: List[str] = []
        breakdown: Dict[str, int] = {}

        for factor in self._factors:
            result = factor.evaluate(context, college)
            breakdown[factor.name] = result.points
            if result.strength:
                strengths.append(result.strength)
            if result.concern:
                concerns.append(result.concern)

        match_score = min(sum(breakdown.values()), self.MAX_SCORE)
        fit_category = self._label_classifier.classify(match_score)

        insights = AIInsights(
            acceptance_probability=self._acceptance_estimator.estimate(
                match_score, college.acceptance_rate
            ),
            ranking=college.ranking,
            specializations=list(college.specializations),
        )

        return MatchResult(
            college_id=college.id,
            match_score=match_score,
            fit_category=fit_category,
            reasoning=self._build_reasoning(context, college, fit_category, strengths),
            strengths=strengths,
            concerns=concerns,
            ai_insights=insights,
            score_breakdown=breakdown,
        )

    def score_colleges(
        self,
        context: StudentContext,
        colleges: List[CollegeData]
    ) -> List[MatchResult]:
        """Score every college; order follows the input."""
        return [self.score_college(context, college) for college in colleges]

    def _build_reasoning(
        self,
        context: StudentContext,
        college: CollegeData,
        fit_category: FitCategory,
        strengths: List[str],
    ) -> str:
        gpa = f"{context.gpa:g}" if context.gpa is not None else "N/A"
        highlights = ". ".join(strengths[:self.REASONING_STRENGTHS])
        description = college.description or ""

        return (
            f"Based on your academic profile (GPA: {gpa}, {self._test_identity(context)}), "
            f"{college.name} is a {fit_category.value.lower()} school for you. "
            f"{highlights}. {description}"
        )

    @staticmethod
    def _test_identity(context: StudentContext) -> str:
        if context.sat_score is not None:
            return f"SAT: {context.sat_score}"
        if context.act_score is not None:
            return f"ACT: {context.act_score}"
        return "No test scores"
