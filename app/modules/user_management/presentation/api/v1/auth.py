# 📄 File: app/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for logging in and for checking and renewing a login.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /auth endpoints issuing JWT access tokens, with slowapi rate limiting on login.
#
# 🔗 Dependencies:
# - FastAPI router, AuthService
# - slowapi limiter (app.shared.core.rate_limiter)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/auth)
# - Mobile app and back office login screens

"""
Authentication API Endpoints

Endpoints:
- POST /login: Email/password authentication with rate limiting
- GET /{token}: Validate a token and issue a fresh one
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.modules.user_management.domain.services import AuthResult, AuthService
from app.modules.user_management.presentation.api.schemas import AuthResponse, LoginRequest
from app.shared.core.rate_limiter import limiter, login_rate_limit

logger = logging.getLogger(__name__)

auth_router = APIRouter()


def _to_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        user_id=result.person_id,
        role_paid=result.role_paid,
        expiration=result.expires_at,
    )


@auth_router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in",
    responses={
        401: {"description": "Invalid credentials"},
        429: {"description": "Too many login attempts"},
    },
)
@limiter.limit(login_rate_limit)
async def login(request: Request, credentials: LoginRequest, auth_service: AuthService = Depends()):
    """
    Authenticate with email and password.

    Users and admins log in through the same endpoint; the token carries the role.
    """
    result = await auth_service.authenticate(credentials.email, credentials.password)
    return _to_response(result)


@auth_router.get(
    "/{token}",
    response_model=AuthResponse,
    summary="Validate and refresh a token",
    responses={401: {"description": "Invalid or expired token"}, 404: {"description": "Account not found"}},
)
async def refresh_token(token: str, auth_service: AuthService = Depends()):
    return _to_response(await auth_service.refresh(token))
