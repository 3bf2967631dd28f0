"""
Colleges API Routes

Public read-only endpoints for the college catalog.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Query

from collegematch.infrastructure.db.dependencies import CollegeRepoDep
from collegematch.infrastructure.db.models.college import CollegeRead
from collegematch.infrastructure.exceptions import NotFoundError


router = APIRouter(prefix="/api/colleges", tags=["colleges"])


@router.get("", response_model=List[CollegeRead])
async def list_colleges(
    repo: CollegeRepoDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
):
    """List catalog entries ordered by ranking."""
    colleges = await repo.list_all(skip=skip, limit=limit)
    return [CollegeRead.model_validate(c, from_attributes=True) for c in colleges]


@router.get("/{college_id}", response_model=CollegeRead)
async def get_college(college_id: UUID, repo: CollegeRepoDep):
    """Get a single college."""
    college = await repo.get_by_id(college_id)
    if college is None:
        raise NotFoundError(
            f"College {college_id} not found",
            operation="get_by_id",
            table="colleges",
        )
    return CollegeRead.model_validate(college, from_attributes=True)
