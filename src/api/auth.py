"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_current_user, get_user_directory
from src.config import get_settings
from src.models.user import User
from src.schemas.auth import UserLogin, UserRegister, UserResponse
from src.services.auth import authenticate_user, end_session, issue_session_token, register_user
from src.services.user_directory import UserDirectory

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])
settings = get_settings()


def set_session_cookie(response: Response, token: str) -> None:
    """Store the session token in the client's cookie jar."""
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        domain=settings.auth_cookie_domain,
        path="/",
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.auth_cookie_name,
        domain=settings.auth_cookie_domain,
        path="/",
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Register a new user."""
    return register_user(directory, user_data.username, user_data.email, user_data.password)


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Login with email and password, and set the session cookie."""
    user = authenticate_user(directory, credentials.email, credentials.password)
    token = issue_session_token(directory, user)
    set_session_cookie(response, token)
    return user


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.post("/logout")
async def logout(
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Logout and invalidate the current session token."""
    end_session(directory, current_user)
    clear_session_cookie(response)
    return {"message": "Logged out successfully"}
