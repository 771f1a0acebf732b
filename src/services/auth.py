"""Authentication service for registration, login and session tokens."""

import logging

from src.exceptions import AuthenticationError, AuthorizationError, ConflictError
from src.models.authentication import Authentication
from src.models.user import User
from src.services.security import credentials_match, generate_salt, hash_credential
from src.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)

# Same message whether the email is unknown or the password is wrong
INVALID_LOGIN_DETAIL = "Incorrect email or password"


def register_user(directory: UserDirectory, username: str, email: str, password: str) -> User:
    """Create a new user with a salted password hash and no session."""
    if directory.find_by_email(email) is not None:
        raise ConflictError("Email already registered")

    salt = generate_salt()
    authentication = Authentication(
        salt=salt,
        password_hash=hash_credential(salt, password),
        session_token=None,
    )
    user = directory.create(username=username, email=email, authentication=authentication)
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(directory: UserDirectory, email: str, password: str) -> User:
    """Authenticate a user by email and password."""
    user = directory.find_by_email(email, include_authentication=True)
    if user is None or user.authentication is None:
        logger.warning(f"Failed login for {email}")
        raise AuthenticationError(INVALID_LOGIN_DETAIL)

    auth = user.authentication
    expected_hash = hash_credential(auth.salt, password)
    if not credentials_match(auth.password_hash, expected_hash):
        logger.warning(f"Failed login for {email}")
        raise AuthenticationError(INVALID_LOGIN_DETAIL)

    return user


def issue_session_token(directory: UserDirectory, user: User) -> str:
    """Derive a fresh session token for the user and persist it.

    Any token issued earlier for this user stops working.
    """
    token = hash_credential(generate_salt(), str(user.id))
    directory.set_session_token(user, token)
    logger.info(f"Issued session for user {user.id}")
    return token


def resolve_session(directory: UserDirectory, token: str | None) -> User:
    """Return the user holding ``token``.

    Missing, rotated and malformed tokens are all rejected the same way.
    """
    if not token:
        raise AuthenticationError()
    user = directory.find_by_session_token(token)
    if user is None:
        raise AuthenticationError()
    return user


def end_session(directory: UserDirectory, user: User) -> None:
    """Clear the user's session token."""
    if user.authentication is not None:
        directory.set_session_token(user, None)
    logger.info(f"Ended session for user {user.id}")


def ensure_owner(identity_id: int, owner_id: int) -> None:
    """Raise AuthorizationError unless the identity owns the resource."""
    if identity_id != owner_id:
        raise AuthorizationError()
