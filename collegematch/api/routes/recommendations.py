"""
Recommendation API Routes

Generate and read back college recommendations for the current user.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from collegematch.api.dependencies import CurrentUserDep, RecommendationServiceDep
from collegematch.domain.scoring import FitCategory, MatchResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


# =============================================================================
# Response Schemas
# =============================================================================

class AIInsightsResponse(BaseModel):
    acceptance_probability: str
    ranking: Optional[int] = None
    specializations: List[str] = []


class RecommendationResponse(BaseModel):
    """One freshly generated recommendation."""
    college_id: str
    match_score: int
    fit_category: str
    reasoning: str
    strengths: List[str]
    concerns: List[str]
    ai_insights: AIInsightsResponse
    score_breakdown: Dict[str, int] = {}


class GenerateResponse(BaseModel):
    recommendations: List[RecommendationResponse]


class CollegeSummary(BaseModel):
    id: str
    name: str
    state: Optional[str] = None
    city: Optional[str] = None
    ranking: Optional[int] = None


class StoredRecommendationResponse(BaseModel):
    """A recommendation as stored by the last generation."""
    id: str
    college_id: str
    match_score: int
    fit_category: str
    reasoning: str
    strengths: List[str]
    concerns: List[str]
    ai_insights: AIInsightsResponse
    updated_at: Optional[datetime] = None
    college: CollegeSummary


class StoredRecommendationsResponse(BaseModel):
    recommendations: List[StoredRecommendationResponse]


def _result_to_response(result: MatchResult) -> RecommendationResponse:
    return RecommendationResponse(**result.to_dict())


def _stored_to_response(recommendation, college) -> StoredRecommendationResponse:
    return StoredRecommendationResponse(
        id=str(recommendation.id),
        college_id=str(recommendation.college_id),
        match_score=recommendation.match_score,
        fit_category=recommendation.fit_category,
        reasoning=recommendation.reasoning,
        strengths=list(recommendation.strengths or []),
        concerns=list(recommendation.concerns or []),
        ai_insights=AIInsightsResponse(**(recommendation.ai_insights or {})),
        updated_at=recommendation.updated_at,
        college=CollegeSummary(
            id=str(college.id),
            name=college.name,
            state=college.state,
            city=college.city,
            ranking=college.ranking,
        ),
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/generate", response_model=GenerateResponse)
async def generate_recommendations(
    user_id: CurrentUserDep,
    service: RecommendationServiceDep,
):
    """
    Score every college for the current user and store the top matches.

    Previous recommendations for the same colleges are overwritten.
    """
    results = await service.generate_for_user(user_id)
    logger.info(f"Generated {len(results)} recommendations for user {user_id}")
    return GenerateResponse(
        recommendations=[_result_to_response(r) for r in results]
    )


@router.get("", response_model=StoredRecommendationsResponse)
async def list_recommendations(
    user_id: CurrentUserDep,
    service: RecommendationServiceDep,
    fit_category: Optional[FitCategory] = Query(
        None, description="Only return Safety, Target or Reach schools"
    ),
):
    """Get the current user's stored recommendations, best first."""
    rows = await service.list_for_user(user_id, fit_category=fit_category)
    return StoredRecommendationsResponse(
        recommendations=[_stored_to_response(rec, college) for rec, college in rows]
    )
