"""
Repository Layer for College Match

Exports all repository classes for dependency injection.
"""

from collegematch.infrastructure.db.repositories.base_repository import (
    BaseRepository,
)
from collegematch.infrastructure.db.repositories.user_profile_repository import (
    UserProfileRepository,
)
from collegematch.infrastructure.db.repositories.college_repository import (
    CollegeRepository,
)
from collegematch.infrastructure.db.repositories.recommendation_repository import (
    RecommendationRepository,
)


__all__ = [
    # Base
    "BaseRepository",
    # Repositories
    "UserProfileRepository",
    "CollegeRepository",
    "RecommendationRepository",
]
