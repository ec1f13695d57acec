"""Routes issuing identity tokens: signup and login."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import AuthServiceDependency
from ...schemas import LoginRequest, LoginResponse, SignupRequest, TokenResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/signup",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def signup(payload: SignupRequest, service: AuthServiceDependency) -> TokenResponse:
    user = await service.register_user(
        username=payload.username,
        email=payload.email,
        password=payload.password,
    )
    return TokenResponse(token=service.issue_token(user).token)


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate with a username or email and a password",
)
async def login(payload: LoginRequest, service: AuthServiceDependency) -> LoginResponse:
    user = await service.authenticate_user(payload.username_or_email, payload.password)
    return LoginResponse(token=service.issue_token(user).token, username=user.username)


__all__ = ["router"]
