"""
Recommendation Service

Generates, ranks and stores college recommendations for one student.
Storage access goes through repositories handed in by the caller.
"""

import logging
from typing import List, Optional, Protocol, Sequence, Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from collegematch.domain.scoring import (
    FitCategory,
    MatchScorer,
    MatchResult,
    Ranker,
)
from collegematch.infrastructure.exceptions import (
    CatalogFetchError,
    PersistenceError,
    ProfileNotFoundError,
)


logger = logging.getLogger(__name__)

# Store failures that are attributed to the storage layer
STORE_ERRORS = (SQLAlchemyError, OSError)


class ProfileStore(Protocol):
    async def get_by_user_id(self, user_id: UUID) -> Optional[Any]:
        ...


class CatalogStore(Protocol):
    async def list_all(self) -> List[Any]:
        ...


class RecommendationStore(Protocol):
    async def upsert(self, user_id: UUID, result: MatchResult) -> None:
        ...

    async def commit(self) -> None:
        ...

    async def list_for_user(
        self,
        user_id: UUID,
        fit_category: Optional[FitCategory] = None
    ) -> List[Any]:
        ...


class RecommendationPersister:
    """
    Writes recommendations one at a time, in rank order.

    Fail-fast: the first failed write stops the batch and raises
    PersistenceError naming the college. The batch is committed before
    persist() returns, so a failed commit is reported as a PersistenceError
    naming every college of the batch.
    """

    def __init__(self, store: RecommendationStore):
        self._store = store

    async def persist(
        self,
        user_id: UUID,
        results: Sequence[MatchResult]
    ) -> None:
        for result in results:
            try:
                await self._store.upsert(user_id, result)
            except STORE_ERRORS as e:
                logger.error(
                    "Failed to save recommendation for user %s, college %s: %s",
                    user_id, result.college_id, e,
                )
                raise PersistenceError([result.college_id], original_error=e) from e

        if not results:
            return

        try:
            await self._store.commit()
        except STORE_ERRORS as e:
            logger.error("Failed to commit recommendations for user %s: %s", user_id, e)
            raise PersistenceError(
                [result.college_id for result in results], original_error=e
            ) from e

        logger.info("Saved %d recommendations for user %s", len(results), user_id)


class RecommendationService:
    """
    Service for the recommendation workflow.

    Handles:
    - Profile lookup for the caller
    - Catalog scan and scoring of every college
    - Ranking and truncation to the top set
    - Upserting the selected results
    """

    def __init__(
        self,
        profiles: ProfileStore,
        colleges: CatalogStore,
        recommendations: RecommendationStore,
        scorer: Optional[MatchScorer] = None,
        ranker: Optional[Ranker] = None,
    ):
        self._profiles = profiles
        self._colleges = colleges
        self._recommendations = recommendations
        self._scorer = scorer or MatchScorer()
        self._ranker = ranker or Ranker()
        self._persister = RecommendationPersister(recommendations)

    async def generate_for_user(self, user_id: UUID) -> List[MatchResult]:
        """
        Score the whole catalog for a user and store the top results.

        Args:
            user_id: Authenticated user's UUID

        Returns:
            Ranked list of at most `ranker.limit` results

        Raises:
            ProfileNotFoundError: no profile for the user
            CatalogFetchError: the catalog could not be loaded
            PersistenceError: a recommendation could not be stored
        """
        profile = await self._profiles.get_by_user_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(str(user_id))

        try:
            colleges = await self._colleges.list_all()
        except STORE_ERRORS as e:
            logger.error("Failed to load college catalog: %s", e)
            raise CatalogFetchError(original_error=e) from e

        context = profile.to_scoring_context()
        scored = self._scorer.score_colleges(
            context,
            [college.to_college_data() for college in colleges],
        )
        ranked = self._ranker.rank(scored)

        logger.info(
            "Scored %d colleges for user %s, keeping %d",
            len(scored), user_id, len(ranked),
        )

        await self._persister.persist(user_id, ranked)
        return ranked

    async def list_for_user(
        self,
        user_id: UUID,
        fit_category: Optional[FitCategory] = None
    ) -> List[Any]:
        """Stored recommendations from the last generation, best first."""
        return await self._recommendations.list_for_user(
            user_id, fit_category=fit_category
        )
