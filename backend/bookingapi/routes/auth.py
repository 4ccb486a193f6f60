"""
Booking API - Admin Auth Route Handlers
========================================

What:  POST /api/register and POST /api/login.
How:   Delegates to AuthService, which is built per request from the app's
       settings (hash method) via the `get_auth_service` dependency.

Login returns a confirmation only; no token or cookie is set.
"""


from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bookingapi.database import get_db_session
from bookingapi.schemas.auth import AdminCredentials
from bookingapi.schemas.common import ErrorResponse, MessageResponse
from bookingapi.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["Admin"])


def get_auth_service(request: Request) -> AuthService:
    return AuthService(hash_method=request.app.state.settings.password_hash_method)


@router.post(
    "/register",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing field or admin already exists", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register an admin",
)
async def register(
    credentials: AdminCredentials,
    db: AsyncSession = Depends(get_db_session, scope="function"),
    auth: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    await auth.register(db, credentials)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=MessageResponse,
    responses={
        401: {"description": "Invalid password", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Check admin credentials",
    description="Verifies name and password. Stateless: no session or token is issued.",
)
async def login(
    credentials: AdminCredentials,
    db: AsyncSession = Depends(get_db_session, scope="function"),
    auth: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    await auth.login(db, credentials)
    return MessageResponse(message="Login successful")
