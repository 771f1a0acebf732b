"""Persistent user store backed by SQLAlchemy."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from src.exceptions import ConflictError
from src.models.authentication import Authentication
from src.models.user import User

logger = logging.getLogger(__name__)


class UserDirectory:
    """Queries and mutations of user records by email, id or session token."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str, include_authentication: bool = False) -> User | None:
        """Get a user by email, optionally loading the authentication block eagerly."""
        query = self.db.query(User).filter(User.email == email)
        if include_authentication:
            query = query.options(joinedload(User.authentication))
        return query.first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_session_token(self, token: str) -> User | None:
        """Get the user currently holding ``token``."""
        return (
            self.db.query(User)
            .join(Authentication, Authentication.user_id == User.id)
            .filter(Authentication.session_token == token)
            .first()
        )

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def create(self, username: str, email: str, authentication: Authentication) -> User:
        """Create a user together with its authentication block."""
        user = User(username=username, email=email, authentication=authentication)
        self.db.add(user)
        self._commit_unique()
        self.db.refresh(user)
        return user

    def update(
        self, user_id: int, username: str | None = None, email: str | None = None
    ) -> User | None:
        """Update the given fields of a user. Returns None if the user does not exist."""
        user = self.find_by_id(user_id)
        if user is None:
            return None
        if username is not None:
            user.username = username
        if email is not None:
            user.email = email
        self._commit_unique()
        self.db.refresh(user)
        return user

    def update_username(self, user_id: int, username: str) -> User | None:
        return self.update(user_id, username=username)

    def set_session_token(self, user: User, token: str | None) -> None:
        """Replace the user's session token (None clears it)."""
        user.authentication.session_token = token
        self.db.commit()

    def delete_by_id(self, user_id: int) -> User | None:
        """Delete a user and its authentication block. Returns the deleted user."""
        user = self.find_by_id(user_id)
        if user is None:
            return None
        self.db.delete(user)
        self.db.commit()
        return user

    def _commit_unique(self) -> None:
        # A concurrent insert can win the race past the email pre-check
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Unique constraint violated: {e.orig}")
            raise ConflictError("Email already registered") from e
