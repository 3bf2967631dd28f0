"""
API Dependencies

FastAPI dependency injection for authentication and common services.

Security: JWT tokens are verified cryptographically using Supabase JWKS (ES256)
with HS256 fallback via the JWT secret. Never decode without verification.
"""

import logging
from typing import Annotated, Optional
from uuid import UUID

import jwt
from jwt import PyJWKClient
from fastapi import Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from collegematch.config.settings import get_settings
from collegematch.domain.scoring import Ranker
from collegematch.domain.services import RecommendationService
from collegematch.infrastructure.exceptions import AuthError
from collegematch.infrastructure.db.dependencies import (
    UserProfileRepoDep,
    CollegeRepoDep,
    RecommendationRepoDep,
)


logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

# Cached JWKS client, PyJWKClient refreshes its keys internally
_jwks_client: Optional[PyJWKClient] = None


def _get_jwks_client() -> PyJWKClient:
    """Return a singleton PyJWKClient for the Supabase JWKS endpoint."""
    global _jwks_client
    if _jwks_client is None:
        settings = get_settings()
        jwks_url = f"{settings.supabase_url}/auth/v1/.well-known/jwks.json"
        _jwks_client = PyJWKClient(jwks_url, cache_keys=True)
    return _jwks_client


async def _decode_with_jwks(token: str, issuer: str) -> dict:
    """
    Verify JWT using Supabase JWKS endpoint (ES256 asymmetric keys).

    A cold key cache means an HTTP fetch, which runs in the threadpool.
    """
    client = _get_jwks_client()
    signing_key = await run_in_threadpool(client.get_signing_key_from_jwt, token)
    return jwt.decode(
        token,
        signing_key.key,
        algorithms=["ES256"],
        issuer=issuer,
        audience="authenticated",
        options={"require": ["exp", "sub", "iss"]},
    )


def _decode_with_secret(token: str, secret: str, issuer: Optional[str]) -> dict:
    """Verify JWT using HS256 symmetric secret (legacy Supabase signing)."""
    required = ["exp", "sub", "iss"] if issuer else ["exp", "sub"]
    return jwt.decode(
        token,
        secret,
        algorithms=["HS256"],
        issuer=issuer,
        audience="authenticated",
        options={"require": required},
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> UUID:
    """
    Extract and verify user ID from a Supabase JWT.

    Verification strategy (in order):
      1. JWKS (ES256), when SUPABASE_URL is configured.
      2. HS256 with ``SUPABASE_JWT_SECRET``.

    Returns:
        Authenticated user ID (``sub`` claim).

    Raises:
        AuthError: token missing, expired, or invalid.
    """
    if not credentials:
        raise AuthError("Missing authorization token")

    token = credentials.credentials
    settings = get_settings()
    issuer = f"{settings.supabase_url}/auth/v1" if settings.supabase_url else None

    payload: Optional[dict] = None

    # --- Strategy 1: JWKS (ES256) ---
    if settings.supabase_url:
        try:
            payload = await _decode_with_jwks(token, issuer)
        except (jwt.exceptions.PyJWKClientError, jwt.InvalidTokenError) as jwks_err:
            logger.debug("JWKS verification failed, trying HS256 fallback: %s", jwks_err)

    # --- Strategy 2: HS256 fallback ---
    if payload is None and settings.supabase_jwt_secret:
        try:
            payload = _decode_with_secret(
                token, settings.supabase_jwt_secret, issuer
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthError("Token has expired", original_error=e)
        except jwt.InvalidTokenError as e:
            logger.warning("HS256 JWT verification also failed: %s", e)

    if payload is None:
        raise AuthError("Invalid or unverifiable token")

    try:
        return UUID(payload.get("sub") or "")
    except ValueError as e:
        raise AuthError("Invalid token: missing user ID", original_error=e)


CurrentUserDep = Annotated[UUID, Depends(get_current_user_id)]


def get_ranker() -> Ranker:
    """Ranker sized from Settings."""
    return Ranker(limit=get_settings().max_recommendations)


async def get_recommendation_service(
    profiles: UserProfileRepoDep,
    colleges: CollegeRepoDep,
    recommendations: RecommendationRepoDep,
    ranker: Ranker = Depends(get_ranker),
) -> RecommendationService:
    """Dependency provider for RecommendationService."""
    return RecommendationService(
        profiles=profiles,
        colleges=colleges,
        recommendations=recommendations,
        ranker=ranker,
    )


RecommendationServiceDep = Annotated[
    RecommendationService,
    Depends(get_recommendation_service)
]
