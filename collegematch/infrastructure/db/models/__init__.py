"""
SQLModel ORM Models for College Match

Exports all database models for Alembic autogenerate and application use.
Import models here to register them with SQLModel.metadata.
"""

from collegematch.infrastructure.db.models.user_profile import (
    UserProfile,
    UserProfileBase,
    UserProfileRead,
)
from collegematch.infrastructure.db.models.college import (
    College,
    CollegeBase,
    CollegeCreate,
    CollegeRead,
)
from collegematch.infrastructure.db.models.recommendation import (
    Recommendation,
    RecommendationBase,
    RecommendationRead,
)


__all__ = [
    # UserProfile
    "UserProfile",
    "UserProfileBase",
    "UserProfileRead",
    # College
    "College",
    "CollegeBase",
    "CollegeCreate",
    "CollegeRead",
    # Recommendation
    "Recommendation",
    "RecommendationBase",
    "RecommendationRead",
]
