"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.models.user import User
from src.services.auth import ensure_owner, resolve_session
from src.services.user_directory import UserDirectory

settings = get_settings()

# auto_error=False so a missing cookie goes through the same 401 path as a bad one
session_cookie = APIKeyCookie(name=settings.auth_cookie_name, auto_error=False)


def get_user_directory(
    db: Annotated[Session, Depends(get_db)],
) -> UserDirectory:
    """Get user directory bound to the request's database session."""
    return UserDirectory(db)


def get_current_user(
    token: Annotated[str | None, Depends(session_cookie)],
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
) -> User:
    """Get the current authenticated user from the session cookie."""
    return resolve_session(directory, token)


def require_owner(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Allow the request only if the current user is the user in the path."""
    ensure_owner(current_user.id, user_id)
    return current_user
