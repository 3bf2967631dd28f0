"""
College SQLModel for College Match

Database model for the college catalog.
"""

from datetime import datetime, timezone
from typing import Optional, List
from uuid import UUID, uuid4

from sqlalchemy import Column, JSON, String
from sqlmodel import Field, SQLModel

from collegematch.domain.scoring.interfaces import CollegeData


class CollegeBase(SQLModel):
    """Base schema for College model."""

    name: str = Field(
        ...,
        max_length=255,
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
        description="College name"
    )

    # Location
    country: str = Field(default="United States", max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)

    # Admission statistics
    acceptance_rate: Optional[float] = Field(
        default=None,
        ge=0.0, le=100.0,
        description="Acceptance rate as a percentage (0-100)"
    )
    avg_gpa: float = Field(
        ...,
        ge=0.0, le=4.0,
        description="Average GPA of admitted students"
    )
    sat_range_min: Optional[int] = Field(default=None, ge=400, le=1600)
    sat_range_max: Optional[int] = Field(default=None, ge=400, le=1600)
    act_range_min: Optional[int] = Field(default=None, ge=1, le=36)
    act_range_max: Optional[int] = Field(default=None, ge=1, le=36)

    # Tuition
    tuition_in_state: Optional[float] = Field(default=None, ge=0)
    tuition_out_state: Optional[float] = Field(default=None, ge=0)

    # Programs
    majors_offered: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
    )
    specializations: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False, default=list),
    )

    ranking: Optional[int] = Field(
        default=None,
        ge=1,
        description="National ranking, lower is better"
    )
    description: Optional[str] = Field(default=None)
    website: Optional[str] = Field(default=None, max_length=255)


class College(CollegeBase, table=True):
    """College catalog table model."""

    __tablename__ = "colleges"

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique college identifier"
    )

    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last update timestamp"
    )

    class Config:
        from_attributes = True

    def to_college_data(self) -> CollegeData:
        """Convert to the scoring engine's view of a college."""
        return CollegeData(
            id=str(self.id),
            name=self.name,
            avg_gpa=self.avg_gpa,
            sat_range_min=self.sat_range_min,
            sat_range_max=self.sat_range_max,
            act_range_min=self.act_range_min,
            act_range_max=self.act_range_max,
            tuition_out_state=self.tuition_out_state,
            majors_offered=list(self.majors_offered or []),
            state=self.state,
            city=self.city,
            acceptance_rate=self.acceptance_rate,
            ranking=self.ranking,
            description=self.description,
            specializations=list(self.specializations or []),
        )


class CollegeCreate(CollegeBase):
    """Schema for creating a new catalog entry."""
    pass


class CollegeRead(CollegeBase):
    """Schema for reading college with all fields."""

    id: UUID
    updated_at: Optional[datetime]
