"""
Unit tests for RecommendationService and RecommendationPersister.

Repositories are replaced by AsyncMocks or a small in-memory store.
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from collegematch.domain.scoring import CollegeData, FitCategory, MatchResult, Ranker
from collegematch.domain.services import (
    RecommendationPersister,
    RecommendationService,
)
from collegematch.infrastructure.exceptions import (
    CatalogFetchError,
    PersistenceError,
    ProfileNotFoundError,
)


def make_profile(context):
    profile = MagicMock()
    profile.to_scoring_context.return_value = context
    return profile


def make_catalog_entry(data: CollegeData):
    college = MagicMock()
    college.to_college_data.return_value = data
    return college


def make_catalog(count: int):
    return [
        make_catalog_entry(
            CollegeData(
                id=f"college-{i:02d}",
                name=f"College {i}",
                avg_gpa=2.5 + (i % 15) / 10,
                sat_range_min=1000 + i * 10,
                sat_range_max=1300 + i * 10,
                acceptance_rate=10 + i,
                ranking=i + 1,
            )
        )
        for i in range(count)
    ]


class InMemoryRecommendationStore:
    """Keeps one record per (user, college), like the unique constraint."""

    def __init__(self):
        self.rows = {}
        self.pending = {}
        self.writes = 0

    async def upsert(self, user_id, result: MatchResult) -> None:
        self.writes += 1
        self.pending[(user_id, result.college_id)] = result.to_record()

    async def commit(self) -> None:
        self.rows.update(self.pending)
        self.pending = {}

    async def list_for_user(self, user_id, fit_category=None):
        return [record for (uid, _), record in self.rows.items() if uid == user_id]


@pytest.fixture
def profiles(strong_student):
    repo = AsyncMock()
    repo.get_by_user_id.return_value = make_profile(strong_student)
    return repo


@pytest.fixture
def colleges():
    repo = AsyncMock()
    repo.list_all.return_value = make_catalog(20)
    return repo


@pytest.fixture
def recommendations():
    return AsyncMock()


@pytest.fixture
def service(profiles, colleges, recommendations):
    return RecommendationService(
        profiles=profiles,
        colleges=colleges,
        recommendations=recommendations,
    )


class TestGenerate:

    @pytest.mark.asyncio
    async def test_returns_ranked_top_results(self, service, recommendations):
        user_id = uuid4()

        results = await service.generate_for_user(user_id)

        assert len(results) == 15
        scores = [r.match_score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert recommendations.upsert.await_count == 15

    @pytest.mark.asyncio
    async def test_writes_in_rank_order(self, service, recommendations):
        user_id = uuid4()

        results = await service.generate_for_user(user_id)

        written = [c.args[1].college_id for c in recommendations.upsert.await_args_list]
        assert written == [r.college_id for r in results]
        assert all(c.args[0] == user_id for c in recommendations.upsert.await_args_list)

    @pytest.mark.asyncio
    async def test_small_catalog_keeps_everything(self, service, colleges):
        colleges.list_all.return_value = make_catalog(3)

        results = await service.generate_for_user(uuid4())

        assert len(results) == 3

    @pytest.mark.asyncio
    async def test_empty_catalog(self, service, colleges, recommendations):
        colleges.list_all.return_value = []

        results = await service.generate_for_user(uuid4())

        assert results == []
        recommendations.upsert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_custom_ranker_limit(self, profiles, colleges, recommendations):
        service = RecommendationService(
            profiles=profiles,
            colleges=colleges,
            recommendations=recommendations,
            ranker=Ranker(limit=5),
        )

        results = await service.generate_for_user(uuid4())

        assert len(results) == 5


class TestGenerateErrors:

    @pytest.mark.asyncio
    async def test_missing_profile(self, service, profiles, colleges):
        profiles.get_by_user_id.return_value = None
        user_id = uuid4()

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.generate_for_user(user_id)

        assert str(user_id) in exc_info.value.message
        colleges.list_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_catalog_unavailable(self, service, colleges, recommendations):
        colleges.list_all.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(CatalogFetchError) as exc_info:
            await service.generate_for_user(uuid4())

        assert isinstance(exc_info.value.original_error, OperationalError)
        recommendations.upsert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_write_failure_stops_the_batch(self, service, recommendations):
        recommendations.upsert.side_effect = [
            None,
            None,
            OperationalError("INSERT", {}, Exception("disk full")),
            None,
        ]

        with pytest.raises(PersistenceError) as exc_info:
            await service.generate_for_user(uuid4())

        assert recommendations.upsert.await_count == 3
        failed_result = recommendations.upsert.await_args_list[2].args[1]
        assert exc_info.value.failed_college_ids == [failed_result.college_id]
        assert exc_info.value.details["failed_college_ids"] == [failed_result.college_id]

    @pytest.mark.asyncio
    async def test_commits_once_after_all_writes(self, service, recommendations):
        calls = []
        recommendations.upsert.side_effect = lambda *args: calls.append("upsert")
        recommendations.commit.side_effect = lambda: calls.append("commit")

        await service.generate_for_user(uuid4())

        assert calls == ["upsert"] * 15 + ["commit"]

    @pytest.mark.asyncio
    async def test_failed_commit_names_every_college(self, service, recommendations):
        recommendations.commit.side_effect = OperationalError("COMMIT", {}, Exception("lost"))

        with pytest.raises(PersistenceError) as exc_info:
            await service.generate_for_user(uuid4())

        written = [c.args[1].college_id for c in recommendations.upsert.await_args_list]
        assert len(written) == 15
        assert exc_info.value.failed_college_ids == written

    @pytest.mark.asyncio
    async def test_failed_write_is_not_committed(self, service, recommendations):
        recommendations.upsert.side_effect = OSError("connection reset")

        with pytest.raises(PersistenceError):
            await service.generate_for_user(uuid4())

        recommendations.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate_unwrapped(self, service, recommendations):
        recommendations.upsert.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            await service.generate_for_user(uuid4())


class TestIdempotence:

    @pytest.mark.asyncio
    async def test_regenerating_overwrites_same_rows(self, profiles, colleges):
        store = InMemoryRecommendationStore()
        service = RecommendationService(
            profiles=profiles, colleges=colleges, recommendations=store
        )
        user_id = uuid4()

        await service.generate_for_user(user_id)
        first = dict(store.rows)
        await service.generate_for_user(user_id)

        assert store.rows == first
        assert len(store.rows) == 15
        assert store.writes == 30

    @pytest.mark.asyncio
    async def test_users_do_not_share_rows(self, profiles, colleges):
        store = InMemoryRecommendationStore()
        service = RecommendationService(
            profiles=profiles, colleges=colleges, recommendations=store
        )

        await service.generate_for_user(uuid4())
        await service.generate_for_user(uuid4())

        assert len(store.rows) == 30


class TestListForUser:

    @pytest.mark.asyncio
    async def test_delegates_to_store(self, service, recommendations):
        user_id = uuid4()
        recommendations.list_for_user.return_value = ["row"]

        rows = await service.list_for_user(user_id)

        assert rows == ["row"]
        recommendations.list_for_user.assert_awaited_once_with(user_id, fit_category=None)

    @pytest.mark.asyncio
    async def test_passes_category_filter(self, service, recommendations):
        user_id = uuid4()
        recommendations.list_for_user.return_value = []

        await service.list_for_user(user_id, fit_category=FitCategory.SAFETY)

        recommendations.list_for_user.assert_awaited_once_with(
            user_id, fit_category=FitCategory.SAFETY
        )


class TestPersister:

    @pytest.mark.asyncio
    async def test_empty_batch_is_a_no_op(self, recommendations):
        await RecommendationPersister(recommendations).persist(uuid4(), [])

        recommendations.upsert.assert_not_awaited()
        recommendations.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_first_write_failure(self, recommendations, strong_student, reference_college):
        from collegematch.domain.scoring import MatchScorer

        result = MatchScorer().score_college(strong_student, reference_college)
        recommendations.upsert.side_effect = OSError("connection reset")

        with pytest.raises(PersistenceError) as exc_info:
            await RecommendationPersister(recommendations).persist(uuid4(), [result, result])

        assert exc_info.value.failed_college_ids == [reference_college.id]
        assert recommendations.upsert.await_count == 1
