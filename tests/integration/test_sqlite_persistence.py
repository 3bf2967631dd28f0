"""
Integration Tests for recommendation storage on a real engine.

Runs the full generation path against a file-backed SQLite database
(aiosqlite driver), so the ON CONFLICT upsert and the commit are
executed, not just compiled.
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from collegematch.domain.scoring import FitCategory
from collegematch.domain.services import RecommendationService
from collegematch.infrastructure.db.database import DatabaseManager
from collegematch.infrastructure.db.models import College, Recommendation, UserProfile
from collegematch.infrastructure.db.repositories import (
    CollegeRepository,
    RecommendationRepository,
    UserProfileRepository,
)


CATALOG_SIZE = 20


async def _prepare(tmp_path):
    manager = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'match.db'}")
    await manager.create_tables()

    user_id = uuid4()
    async with manager.session_factory() as session:
        session.add(UserProfile(
            id=user_id,
            gpa=3.6,
            sat_score=1350,
            preferred_majors=["Computer Science"],
            preferred_locations=["California"],
            budget_max=50000,
            extracurriculars=[{"name": n} for n in ("a", "b", "c", "d")],
        ))
        for i in range(CATALOG_SIZE):
            session.add(College(
                name=f"College {i:02d}",
                avg_gpa=3.0 + (i % 10) / 10,
                sat_range_min=1100 + i * 10,
                sat_range_max=1400 + i * 10,
                majors_offered=["Computer Science"] if i % 2 else ["History"],
                state="California" if i % 3 else "Texas",
                tuition_out_state=30000 + i * 2000,
                acceptance_rate=5 + i * 3,
                ranking=i + 1,
            ))
        await session.commit()

    return manager, user_id


async def _generate(manager, user_id):
    async with manager.session_factory() as session:
        service = RecommendationService(
            profiles=UserProfileRepository(session),
            colleges=CollegeRepository(session),
            recommendations=RecommendationRepository(session),
        )
        return await service.generate_for_user(user_id)


async def _stored(manager, user_id, fit_category=None):
    async with manager.session_factory() as session:
        return await RecommendationRepository(session).list_for_user(
            user_id, fit_category=fit_category
        )


async def _row_count(manager):
    async with manager.session_factory() as session:
        result = await session.execute(select(func.count()).select_from(Recommendation))
        return result.scalar_one()


def _snapshot(rows):
    return {
        str(rec.college_id): (
            rec.id,
            rec.match_score,
            rec.fit_category,
            rec.reasoning,
            rec.strengths,
            rec.concerns,
            rec.ai_insights,
            rec.created_at,
        )
        for rec, _ in rows
    }


@pytest.mark.asyncio
async def test_regeneration_updates_rows_in_place(tmp_path):
    manager, user_id = await _prepare(tmp_path)
    try:
        first_results = await _generate(manager, user_id)
        first = await _stored(manager, user_id)

        second_results = await _generate(manager, user_id)
        second = await _stored(manager, user_id)

        assert len(first_results) == 15
        assert await _row_count(manager) == 15
        assert _snapshot(second) == _snapshot(first)
        assert [r.to_record() for r in second_results] == [
            r.to_record() for r in first_results
        ]
    finally:
        await manager.close()


@pytest.mark.asyncio
async def test_stored_rows_match_generated_results(tmp_path):
    manager, user_id = await _prepare(tmp_path)
    try:
        results = await _generate(manager, user_id)
        rows = await _stored(manager, user_id)

        assert [str(rec.college_id) for rec, _ in rows] == [r.college_id for r in results]
        for (rec, college), result in zip(rows, results):
            record = result.to_record()
            assert rec.match_score == record["match_score"]
            assert rec.fit_category == record["fit_category"]
            assert rec.strengths == record["strengths"]
            assert rec.ai_insights == record["ai_insights"]
            assert college.ranking == record["ai_insights"]["ranking"]
    finally:
        await manager.close()


@pytest.mark.asyncio
async def test_users_keep_separate_rows(tmp_path):
    manager, user_id = await _prepare(tmp_path)
    try:
        other_id = uuid4()
        async with manager.session_factory() as session:
            session.add(UserProfile(id=other_id, gpa=2.5))
            await session.commit()

        await _generate(manager, user_id)
        await _generate(manager, other_id)

        assert await _row_count(manager) == 30
        assert len(await _stored(manager, other_id)) == 15
    finally:
        await manager.close()


@pytest.mark.asyncio
async def test_category_filter(tmp_path):
    manager, user_id = await _prepare(tmp_path)
    try:
        results = await _generate(manager, user_id)
        expected = [r.college_id for r in results if r.fit_category == FitCategory.TARGET]
        assert expected

        rows = await _stored(manager, user_id, fit_category=FitCategory.TARGET)

        assert [str(rec.college_id) for rec, _ in rows] == expected
        assert all(rec.fit_category == "Target" for rec, _ in rows)
    finally:
        await manager.close()
