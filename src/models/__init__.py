"""SQLAlchemy models."""

from src.models.authentication import Authentication
from src.models.user import User

__all__ = [
    "User",
    "Authentication",
]
