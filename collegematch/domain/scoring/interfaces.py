"""
Scoring Interfaces for College Match

Defines protocols and data models for the scoring engine.
Follows Interface Segregation and Dependency Inversion principles.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Protocol, runtime_checkable
from enum import Enum


class FitCategory(Enum):
    """Classification labels derived from the match score."""
    SAFETY = "Safety"
    TARGET = "Target"
    REACH = "Reach"


class AcceptanceProbability(Enum):
    """Qualitative acceptance tiers."""
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"
    VERY_LOW = "Very Low"


@dataclass
class StudentContext:
    """
    Student profile context for scoring.

    Optional numeric fields stay None when absent so that "absent"
    and "zero" are distinguishable.
    """
    user_id: str

    # Academic
    gpa: Optional[float] = None  # 0.0-4.0
    sat_score: Optional[int] = None  # 400-1600
    act_score: Optional[int] = None  # 1-36

    # Preferences
    preferred_majors: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)  # display only
    preferred_locations: List[str] = field(default_factory=list)
    budget_max: Optional[float] = None

    # Only the count is consulted
    extracurriculars: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class CollegeData:
    """College catalog entry as seen by the scoring engine."""
    id: str
    name: str
    avg_gpa: float

    # Test score ranges of admitted students
    sat_range_min: Optional[int] = None
    sat_range_max: Optional[int] = None
    act_range_min: Optional[int] = None
    act_range_max: Optional[int] = None

    tuition_out_state: Optional[float] = None
    majors_offered: List[str] = field(default_factory=list)

    # Location
    state: Optional[str] = None
    city: Optional[str] = None

    acceptance_rate: Optional[float] = None  # 0-100
    ranking: Optional[int] = None  # lower is better
    description: Optional[str] = None
    specializations: List[str] = field(default_factory=list)


@dataclass
class FactorResult:
    """Outcome of a single factor: points plus at most one note."""
    points: int
    strength: Optional[str] = None
    concern: Optional[str] = None


@dataclass
class AIInsights:
    """Auxiliary insights attached to every recommendation."""
    acceptance_probability: AcceptanceProbability
    ranking: Optional[int] = None
    specializations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "acceptance_probability": self.acceptance_probability.value,
            "ranking": self.ranking,
            "specializations": list(self.specializations),
        }


@dataclass
class MatchResult:
    """
    Scored college for one student.

    Final output ready for ranking and persistence.
    """
    college_id: str
    match_score: int  # 0-100
    fit_category: FitCategory
    reasoning: str
    strengths: List[str]
    concerns: List[str]
    ai_insights: AIInsights

    # Points per factor, returned to the user for transparency
    score_breakdown: Dict[str, int] = field(default_factory=dict)

    def to_record(self) -> Dict[str, Any]:
        """Fields stored for the (user, college) pair."""
        return {
            "college_id": self.college_id,
            "match_score": self.match_score,
            "fit_category": self.fit_category.value,
            "reasoning": self.reasoning,
            "strengths": list(self.strengths),
            "concerns": list(self.concerns),
            "ai_insights": self.ai_insights.to_dict(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response format."""
        data = self.to_record()
        data["score_breakdown"] = dict(self.score_breakdown)
        return data


@runtime_checkable
class ScoringFactor(Protocol):
    """
    Protocol for scoring factors.

    Each factor awards a bounded number of points for one aspect
    of the profile/college pair. Factors are independent and additive.
    """

    @property
    def name(self) -> str:
        """Factor name for transparency."""
        ...

    @property
    def max_points(self) -> int:
        """Upper bound of points this factor can award."""
        ...

    def evaluate(
        self,
        context: StudentContext,
        college: CollegeData
    ) -> FactorResult:
        """Evaluate this factor for one pair."""
        ...


class BaseScoringFactor(ABC):
    """Base class for scoring factors with common functionality."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def max_points(self) -> int:
        pass

    @abstractmethod
    def evaluate(
        self,
        context: StudentContext,
        college: CollegeData
    ) -> FactorResult:
        pass
