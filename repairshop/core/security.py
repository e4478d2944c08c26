"""Password hashing and verification (bcrypt)."""

from functools import lru_cache

import bcrypt

# Default bcrypt cost (rounds); Settings.BCRYPT_ROUNDS overrides it per deployment.
BCRYPT_ROUNDS = 10

# Min/max lengths for username and password validation.
USERNAME_MAX_LEN = 255
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> bytes:
    """Hash compared against when the username is unknown, one per cost factor."""
    return bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt(rounds=rounds))


def burn_password_check(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> None:
    """Spend the same work as verify_password against a hash of the given cost."""
    bcrypt.checkpw(plain_password.encode("utf-8")[:72], _dummy_hash(rounds))
