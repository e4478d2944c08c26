"""Session tokens: issue signed JWTs for verified users and resolve them back.

Tokens are stateless HS256 JWTs carrying the user id, username and role with
iat/exp claims. Validation fails closed (returns None) on any problem and
re-reads the user row so role changes and deletions after issuance take
effect immediately. There is no revocation list; logout discards the token
client-side.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from repairshop.core.config import Settings
from repairshop.core.errors import (
    AuthenticationRequired,
    AuthorizationDenied,
    InternalError,
)
from repairshop.models.user import ADMIN_ROLE
from repairshop.repositories.users import UserRepository
from repairshop.schemas.auth import PublicUser
from repairshop.services.credentials import to_public_user

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class TokenService:
    """Issues and validates bearer tokens with the secret from the given settings."""

    def __init__(self, settings: Settings) -> None:
        secret = settings.JWT_SECRET.get_secret_value()
        if not secret or not secret.strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        self._secret = secret
        self.algorithm = settings.JWT_ALGORITHM
        self.ttl = timedelta(hours=settings.JWT_EXPIRE_HOURS)

    def issue(self, user: PublicUser) -> str:
        """Create a signed token for user, expiring after the configured TTL."""
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "id": user.id,
            "username": user.username,
            "role": user.role,
            "iat": now,
            "exp": now + self.ttl,
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self.algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError) as e:
            logger.exception("Token signing failed for user id=%s", user.id)
            raise InternalError() from e

    def decode(self, token: str | None) -> dict[str, Any] | None:
        """Return verified claims, or None if the token is missing, malformed, forged or expired."""
        if not token:
            return None
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError as e:
            logger.debug("Rejected token: %s", e)
            return None

    def validate(self, token: str | None, users: UserRepository) -> PublicUser | None:
        """Resolve a token to the current stored user, or None."""
        payload = self.decode(token)
        if payload is None:
            return None
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            return None
        user = users.find_user_by_id(user_id)
        if user is None:
            logger.info("Token for missing user id=%s rejected", user_id)
            return None
        return to_public_user(user)

    def require_auth(self, token: str | None, users: UserRepository) -> PublicUser:
        user = self.validate(token, users)
        if user is None:
            raise AuthenticationRequired()
        return user

    def require_admin(self, token: str | None, users: UserRepository) -> PublicUser:
        """Like require_auth, but also raises AuthorizationDenied for non-admin roles."""
        user = self.require_auth(token, users)
        if user.role != ADMIN_ROLE:
            raise AuthorizationDenied()
        return user
