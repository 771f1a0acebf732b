"""User schemas."""

from pydantic import BaseModel, EmailStr, Field


class UserUpdate(BaseModel):
    """Update the current user's profile."""

    username: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)
