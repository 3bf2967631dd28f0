"""
Recommendation Repository for College Match

Stores engine output with insert-or-update semantics keyed by
(user_id, college_id).
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from collegematch.domain.scoring.interfaces import FitCategory, MatchResult
from collegematch.infrastructure.db.models.college import College
from collegematch.infrastructure.db.models.recommendation import Recommendation


logger = logging.getLogger(__name__)

# Columns replaced when the (user_id, college_id) pair already exists
UPSERT_COLUMNS = (
    "match_score",
    "fit_category",
    "reasoning",
    "strengths",
    "concerns",
    "ai_insights",
    "updated_at",
)


class RecommendationRepository:
    """Repository for stored recommendations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def build_upsert(self, user_id: UUID, result: MatchResult):
        """
        Build a single-statement upsert for one recommendation.

        Uses the dialect's ON CONFLICT support so the unique
        constraint decides between insert and update atomically.
        """
        now = datetime.now(timezone.utc)
        record = result.to_record()

        values = {
            "id": uuid4(),
            "user_id": user_id,
            "college_id": UUID(record["college_id"]),
            "match_score": record["match_score"],
            "fit_category": record["fit_category"],
            "reasoning": record["reasoning"],
            "strengths": record["strengths"],
            "concerns": record["concerns"],
            "ai_insights": record["ai_insights"],
            "created_at": now,
            "updated_at": now,
        }

        insert = sqlite_insert if self._dialect_name() == "sqlite" else pg_insert
        stmt = insert(Recommendation).values(**values)
        return stmt.on_conflict_do_update(
            index_elements=["user_id", "college_id"],
            set_={column: getattr(stmt.excluded, column) for column in UPSERT_COLUMNS},
        )

    async def upsert(self, user_id: UUID, result: MatchResult) -> None:
        """Insert the recommendation or overwrite the existing one."""
        await self.session.execute(self.build_upsert(user_id, result))
        await self.session.flush()

    async def commit(self) -> None:
        """End the generation's unit of work before the response is built."""
        await self.session.commit()

    async def list_for_user(
        self,
        user_id: UUID,
        fit_category: Optional[FitCategory] = None
    ) -> List[Tuple[Recommendation, College]]:
        """
        Stored recommendations with their colleges, best first.

        Args:
            user_id: Owner of the recommendations
            fit_category: Only return this category when given
        """
        stmt = (
            select(Recommendation, College)
            .join(College, College.id == Recommendation.college_id)
            .where(Recommendation.user_id == user_id)
        )
        if fit_category is not None:
            stmt = stmt.where(Recommendation.fit_category == fit_category.value)
        stmt = stmt.order_by(
            Recommendation.match_score.desc(),
            College.ranking.asc().nulls_last(),
            College.id.asc(),
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    def _dialect_name(self) -> str:
        bind = self.session.bind
        return bind.dialect.name if bind is not None else "postgresql"
