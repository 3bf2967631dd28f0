# Scoring module for College Match
from collegematch.domain.scoring.interfaces import (
    StudentContext,
    CollegeData,
    FactorResult,
    MatchResult,
    AIInsights,
    FitCategory,
    AcceptanceProbability,
    ScoringFactor,
    BaseScoringFactor,
)
from collegematch.domain.scoring.match_scorer import MatchScorer
from collegematch.domain.scoring.label_classifier import LabelClassifier
from collegematch.domain.scoring.acceptance_estimator import AcceptanceEstimator
from collegematch.domain.scoring.ranker import Ranker

__all__ = [
    "StudentContext",
    "CollegeData",
    "FactorResult",
    "MatchResult",
    "AIInsights",
    "FitCategory",
    "AcceptanceProbability",
    "ScoringFactor",
    "BaseScoringFactor",
    "MatchScorer",
    "LabelClassifier",
    "AcceptanceEstimator",
    "Ranker",
]
