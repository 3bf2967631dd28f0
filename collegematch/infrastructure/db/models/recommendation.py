"""
Recommendation SQLModel for College Match

Stored output of the recommendation engine, one row per (user, college).
Regeneration overwrites the row in place; no history is kept.
"""

from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from uuid import UUID, uuid4

from sqlalchemy import Column, JSON, Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class RecommendationBase(SQLModel):
    """Base schema for stored recommendations."""

    match_score: int = Field(..., ge=0, le=100)
    fit_category: str = Field(
        ...,
        max_length=20,
        description="Safety, Target or Reach"
    )
    reasoning: str = Field(default="", sa_column=Column(Text, nullable=False))
    strengths: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
    )
    concerns: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
    )
    ai_insights: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False, default=dict),
        description="acceptance_probability, ranking, specializations"
    )


class Recommendation(RecommendationBase, table=True):
    """Recommendation table model."""

    __tablename__ = "recommendations"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "college_id",
            name="uq_recommendations_user_college",
        ),
    )

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True
    )

    user_id: UUID = Field(
        ...,
        index=True,
        description="User the recommendation was generated for"
    )

    # Removing a college removes its recommendations
    college_id: UUID = Field(
        ...,
        foreign_key="colleges.id",
        ondelete="CASCADE",
        index=True,
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


class RecommendationRead(RecommendationBase):
    """Schema for reading a stored recommendation."""

    id: UUID
    user_id: UUID
    college_id: UUID
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
