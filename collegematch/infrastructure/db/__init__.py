"""
Database Infrastructure Package for College Match

Exports database utilities and dependency providers.
"""

from collegematch.infrastructure.db.database import (
    DatabaseManager,
    get_db_manager,
    get_session,
    get_session_context,
    init_db,
    close_db,
)

from collegematch.infrastructure.db.dependencies import (
    SessionDep,
    get_user_profile_repository,
    get_college_repository,
    get_recommendation_repository,
    UserProfileRepoDep,
    CollegeRepoDep,
    RecommendationRepoDep,
)


__all__ = [
    # Database management
    "DatabaseManager",
    "get_db_manager",
    "get_session",
    "get_session_context",
    "init_db",
    "close_db",
    # Dependencies
    "SessionDep",
    "get_user_profile_repository",
    "get_college_repository",
    "get_recommendation_repository",
    "UserProfileRepoDep",
    "CollegeRepoDep",
    "RecommendationRepoDep",
]
