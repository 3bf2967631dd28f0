"""
UserProfile SQLModel for College Match

Database model for student profiles with academic and preference fields.
Profiles are created by the profile editor; this service only reads them.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any
from uuid import UUID

from sqlalchemy import Column, JSON
from pydantic import ConfigDict
from sqlmodel import Field, SQLModel

from collegematch.domain.scoring.interfaces import StudentContext


class UserProfileBase(SQLModel):
    """
    Base schema for UserProfile (shared between table and read schema).

    Follows DRY principle - common fields in one place.
    """

    # User identity (UI only - not used for scoring)
    full_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)

    # Academic metrics
    gpa: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=4.0,
        description="GPA on 4.0 scale"
    )
    sat_score: Optional[int] = Field(
        default=None,
        ge=400,
        le=1600,
        description="SAT score"
    )
    act_score: Optional[int] = Field(
        default=None,
        ge=1,
        le=36,
        description="ACT score"
    )

    # Preferences
    preferred_majors: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
        description="Intended fields of study"
    )
    interests: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
        description="Personal interests (display only)"
    )
    career_goals: Optional[str] = Field(default=None)
    preferred_locations: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
        description="States or cities the student would like to study in"
    )
    budget_max: Optional[float] = Field(
        default=None,
        ge=0,
        description="Maximum yearly tuition the student can afford"
    )
    extracurriculars: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
        description="Activity records (name, role, duration, description)"
    )


class UserProfile(UserProfileBase, table=True):
    """
    UserProfile database table model.

    The primary key is the authenticated user's id.
    """

    __tablename__ = "user_profiles"

    id: UUID = Field(
        ...,
        primary_key=True,
        description="Authenticated user id"
    )

    # Timestamps
    created_at: Optional[datetime] = Field(
        default=None,
        description="Record creation timestamp"
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        description="Last update timestamp"
    )

    model_config = ConfigDict(from_attributes=True)

    def to_scoring_context(self) -> StudentContext:
        """Convert to the scoring engine's view of a student."""
        return StudentContext(
            user_id=str(self.id),
            gpa=self.gpa,
            sat_score=self.sat_score,
            act_score=self.act_score,
            preferred_majors=list(self.preferred_majors or []),
            interests=list(self.interests or []),
            preferred_locations=list(self.preferred_locations or []),
            budget_max=self.budget_max,
            extracurriculars=list(self.extracurriculars or []),
        )


class UserProfileRead(UserProfileBase):
    """Schema for reading user profile with all fields."""

    id: UUID
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
