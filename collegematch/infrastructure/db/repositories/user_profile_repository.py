"""
UserProfile Repository for College Match

Read access to student profiles.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from collegematch.infrastructure.db.models.user_profile import UserProfile
from collegematch.infrastructure.db.repositories.base_repository import BaseRepository


class UserProfileRepository(BaseRepository[UserProfile, SQLModel]):
    """
    Repository for UserProfile lookups.

    The profile primary key is the authenticated user's id.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(UserProfile, session)

    async def get_by_user_id(self, user_id: UUID) -> Optional[UserProfile]:
        """
        Get a profile by the authenticated user's ID.

        Returns:
            UserProfile or None if not found
        """
        stmt = select(UserProfile).where(UserProfile.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
