"""
College Repository for College Match

Catalog access: full scans for scoring, lookups for seeding.
"""

from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from collegematch.infrastructure.db.models.college import College, CollegeCreate
from collegematch.infrastructure.db.repositories.base_repository import BaseRepository


class CollegeRepository(BaseRepository[College, CollegeCreate]):
    """Repository for the college catalog."""

    def __init__(self, session: AsyncSession):
        super().__init__(College, session)

    async def get_by_name(self, name: str) -> Optional[College]:
        """Get a college by its unique name."""
        stmt = select(College).where(College.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(
        self,
        skip: int = 0,
        limit: Optional[int] = None
    ) -> List[College]:
        """
        Catalog scan, the full catalog unless a page is requested.

        Ordered by ranking (unranked last) so listings are stable;
        scoring does not depend on this order.
        """
        stmt = select(College).order_by(
            College.ranking.asc().nulls_last(),
            College.name.asc(),
        ).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert_by_name(self, data: CollegeCreate) -> College:
        """Insert a college or refresh the entry with the same name."""
        existing = await self.get_by_name(data.name)
        if existing is None:
            return await self.create(data)
        return await self.update(existing, data)
