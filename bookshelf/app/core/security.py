"""Security utilities for credential handling."""

import re
import uuid

import bcrypt

from bookshelf.app.runtime.context import get_config

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# bcrypt only consumes the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def is_valid_email(email: str) -> bool:
    """Check an email address against the basic ``local@domain.tld`` shape."""
    return bool(EMAIL_PATTERN.match(email))


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a plaintext password with a freshly generated bcrypt salt.

    Args:
        password: The plaintext password
        rounds: bcrypt work factor (defaults to ``security.bcrypt_rounds``)

    Returns:
        The bcrypt hash, salt and cost included, as a string
    """
    if rounds is None:
        rounds = get_config().security.bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Args:
        password: The plaintext password presented by the client
        password_hash: The stored bcrypt hash

    Returns:
        True if the password matches, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def parse_entity_id(value: str) -> str | None:
    """Normalize a client supplied identifier.

    Returns:
        The canonical UUID string, or None when ``value`` is not a UUID
    """
    try:
        return str(uuid.UUID(value))
    except (ValueError, AttributeError, TypeError):
        return None
