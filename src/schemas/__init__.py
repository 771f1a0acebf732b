"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import UserLogin, UserRegister, UserResponse
from src.schemas.user import UserUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "UserUpdate",
]
