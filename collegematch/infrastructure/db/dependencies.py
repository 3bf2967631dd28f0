"""
Dependency Injection Providers for College Match

Provides FastAPI dependencies for database sessions and repositories.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from collegematch.infrastructure.db.database import get_session
from collegematch.infrastructure.db.repositories import (
    UserProfileRepository,
    CollegeRepository,
    RecommendationRepository,
)


# Type alias for session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_user_profile_repository(
    session: SessionDep,
) -> AsyncGenerator[UserProfileRepository, None]:
    """Dependency provider for UserProfileRepository."""
    yield UserProfileRepository(session)


async def get_college_repository(
    session: SessionDep,
) -> AsyncGenerator[CollegeRepository, None]:
    """Dependency provider for CollegeRepository."""
    yield CollegeRepository(session)


async def get_recommendation_repository(
    session: SessionDep,
) -> AsyncGenerator[RecommendationRepository, None]:
    """Dependency provider for RecommendationRepository."""
    yield RecommendationRepository(session)


# Type aliases for repository dependencies
UserProfileRepoDep = Annotated[
    UserProfileRepository,
    Depends(get_user_profile_repository)
]
CollegeRepoDep = Annotated[
    CollegeRepository,
    Depends(get_college_repository)
]
RecommendationRepoDep = Annotated[
    RecommendationRepository,
    Depends(get_recommendation_repository)
]
