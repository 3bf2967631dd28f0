# Scoring factors submodule
from collegematch.domain.scoring.factors.gpa_fit import GpaFitFactor
from collegematch.domain.scoring.factors.test_score_fit import TestScoreFitFactor
from collegematch.domain.scoring.factors.major_match import MajorMatchFactor
from collegematch.domain.scoring.factors.location_fit import LocationFitFactor
from collegematch.domain.scoring.factors.budget_fit import BudgetFitFactor
from collegematch.domain.scoring.factors.extracurricular_fit import ExtracurricularFactor

__all__ = [
    "GpaFitFactor",
    "TestScoreFitFactor",
    "MajorMatchFactor",
    "LocationFitFactor",
    "BudgetFitFactor",
    "ExtracurricularFactor",
]
