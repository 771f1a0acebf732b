"""Authentication model.

Holds the credential material for a user. It is kept in its own table so that
user queries never carry it along unless asked, and it is never part of an API
response schema.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Authentication(Base, TimestampMixin):
    """Password hash, salt and current session token of a user."""

    __tablename__ = "user_authentications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash = Column(String(64), nullable=False)
    salt = Column(String(255), unique=True, nullable=False)
    # Null until the first login, overwritten on every login
    session_token = Column(String(64), unique=True, nullable=True, index=True)

    user = relationship("User", back_populates="authentication")
