"""
Test configuration and fixtures for College Match.

Provides shared fixtures for unit and integration tests.
"""

import os

# Settings are cached at import time; configure them before the app loads
os.environ.setdefault("ENVIRONMENT", "testing")
TEST_JWT_SECRET = "test-jwt-secret-0123456789abcdef0123"
os.environ["SUPABASE_JWT_SECRET"] = TEST_JWT_SECRET
os.environ.pop("SUPABASE_URL", None)
os.environ.pop("DATABASE_URL", None)

import time
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import jwt
import pytest
from fastapi.testclient import TestClient

from collegematch.domain.scoring import CollegeData, StudentContext


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Get the FastAPI application with clean dependency overrides."""
    from collegematch.main import app
    app.dependency_overrides = {}
    yield app
    app.dependency_overrides = {}


@pytest.fixture
def client(app):
    """Get synchronous test client."""
    return TestClient(app)


# =============================================================================
# Auth Fixtures
# =============================================================================

@pytest.fixture
def mock_user_id():
    return uuid4()


def make_token(sub: str, expires_in: int = 3600, secret: str = TEST_JWT_SECRET) -> str:
    """Sign a Supabase-style access token with the test secret."""
    now = int(time.time())
    return jwt.encode(
        {
            "sub": sub,
            "aud": "authenticated",
            "iat": now,
            "exp": now + expires_in,
        },
        secret,
        algorithm="HS256",
    )


@pytest.fixture
def token_factory():
    """Build signed tokens with custom claims."""
    return make_token


@pytest.fixture
def auth_headers(mock_user_id):
    return {"Authorization": f"Bearer {make_token(str(mock_user_id))}"}


# =============================================================================
# Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_session():
    """Mock AsyncSession bound to a PostgreSQL engine."""
    session = MagicMock()
    session.execute = AsyncMock(return_value=MagicMock())
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.bind.dialect.name = "postgresql"
    return session


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def strong_student():
    """Student from the reference scenario: 3.8 GPA, 1450 SAT, 4 activities."""
    return StudentContext(
        user_id=str(uuid4()),
        gpa=3.8,
        sat_score=1450,
        preferred_majors=["Computer Science"],
        preferred_locations=["California"],
        budget_max=60000,
        extracurriculars=[
            {"name": "Robotics"},
            {"name": "Debate"},
            {"name": "Orchestra"},
            {"name": "Volunteering"},
        ],
    )


@pytest.fixture
def reference_college():
    """College from the reference scenario."""
    return CollegeData(
        id=str(uuid4()),
        name="Pacific Tech",
        avg_gpa=3.5,
        sat_range_min=1300,
        sat_range_max=1500,
        act_range_min=29,
        act_range_max=34,
        tuition_out_state=55000,
        majors_offered=["Computer Science", "Engineering"],
        state="California",
        city="Pasadena",
        acceptance_rate=20,
        ranking=10,
        description="A small research institute.",
        specializations=["Robotics", "Astrophysics"],
    )
