"""Salt generation and keyed credential hashing."""

import base64
import hashlib
import hmac
import secrets

from src.config import get_settings

SALT_BYTES = 128


def generate_salt() -> str:
    """Return a fresh base64-encoded random value from the OS CSPRNG.

    Used both as a per-user password salt and as the seed of a session token.
    """
    return base64.b64encode(secrets.token_bytes(SALT_BYTES)).decode("ascii")


def hash_credential(salt: str, secret: str, server_secret: str | None = None) -> str:
    """Hash ``secret`` with ``salt`` using HMAC-SHA256 keyed by the server secret.

    The output is deterministic for a given (salt, secret, server secret).
    ``secret`` is the plaintext password for password hashes and the user id
    for session tokens.

    Args:
        salt: Per-call random salt from :func:`generate_salt`
        secret: Value being protected
        server_secret: Override for the configured ``AUTH_SECRET``

    Returns:
        Lowercase hex digest (64 characters)
    """
    key = server_secret if server_secret is not None else get_settings().auth_secret
    # Length prefix keeps salt and secret apart even when the salt contains "/"
    message = f"{len(salt)}:{salt}{secret}".encode()
    return hmac.new(key.encode(), message, hashlib.sha256).hexdigest()


def credentials_match(expected: str, actual: str) -> bool:
    """Constant-time comparison of two hashes."""
    return hmac.compare_digest(expected.encode(), actual.encode())
