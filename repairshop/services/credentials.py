"""Credential store: registration and username/password verification."""

import logging

from repairshop.core.errors import ConflictError, InvalidCredentials, ValidationError
from repairshop.core.security import (
    BCRYPT_ROUNDS,
    PASSWORD_MAX_LEN,
    USERNAME_MAX_LEN,
    burn_password_check,
    hash_password,
    verify_password,
)
from repairshop.models.user import DEFAULT_ROLE, ROLES, User
from repairshop.repositories.users import UserRepository
from repairshop.schemas.auth import PublicUser

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Username and password are required"


def to_public_user(user: User) -> PublicUser:
    """Project a stored user to its hash-free form."""
    return PublicUser(
        id=user.id,
        username=user.username,
        role=user.role,
        created_at=user.created_at,
    )


def _require_fields(username: str | None, password: str | None) -> None:
    if not username or not password:
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if len(username) > USERNAME_MAX_LEN or len(password) > PASSWORD_MAX_LEN:
        raise ValidationError("Username or password is too long")


class CredentialStore:
    """Owns user records and answers whether a username/password pair is valid."""

    def __init__(self, users: UserRepository, bcrypt_rounds: int = BCRYPT_ROUNDS) -> None:
        self.users = users
        self.bcrypt_rounds = bcrypt_rounds

    def register(
        self, username: str | None, password: str | None, role: str | None = None
    ) -> PublicUser:
        """
        Create a user with a bcrypt-hashed password.

        Raises ValidationError on empty fields or an unknown role, and
        ConflictError when the username is taken (including a concurrent
        insert that loses on the unique constraint).
        """
        _require_fields(username, password)
        role = role or DEFAULT_ROLE
        if role not in ROLES:
            raise ValidationError(f"Role must be one of {sorted(ROLES)}")

        if self.users.find_user_by_username(username) is not None:
            raise ConflictError("Username already exists")

        user = self.users.insert_user(
            username=username,
            password_hash=hash_password(password, rounds=self.bcrypt_rounds),
            role=role,
        )
        logger.info("Registered user id=%s username=%s role=%s", user.id, user.username, user.role)
        return to_public_user(user)

    def verify(self, username: str | None, password: str | None) -> PublicUser:
        """
        Return the user identified by username/password or raise InvalidCredentials.

        Unknown usernames and wrong passwords produce the same error and cost
        the same bcrypt work.
        """
        _require_fields(username, password)
        user = self.users.find_user_by_username(username)
        if user is None:
            burn_password_check(password, rounds=self.bcrypt_rounds)
            logger.warning("Login failed: unknown username=%s", username)
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.warning("Login failed: wrong password for username=%s", username)
            raise InvalidCredentials()
        return to_public_user(user)
