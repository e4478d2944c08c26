"""User persistence: the only storage surface the auth services depend on."""

import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from repairshop.core.errors import ConflictError
from repairshop.models.user import User

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Lookup and insert of user rows. Implementations enforce unique usernames."""

    def find_user_by_username(self, username: str) -> User | None: ...

    def find_user_by_id(self, user_id: int) -> User | None: ...

    def insert_user(self, username: str, password_hash: str, role: str) -> User: ...


class SqlUserRepository:
    """UserRepository backed by a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_user_by_username(self, username: str) -> User | None:
        return self.session.query(User).filter(User.username == username).first()

    def find_user_by_id(self, user_id: int) -> User | None:
        return self.session.query(User).filter(User.id == user_id).first()

    def insert_user(self, username: str, password_hash: str, role: str) -> User:
        """
        Insert and commit a user row; return it with server defaults loaded.

        Raises ConflictError when the unique username constraint rejects the
        row (e.g. a concurrent registration won the race). The session is
        rolled back so no partial state remains.
        """
        user = User(username=username, password_hash=password_hash, role=role)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Insert rejected for username=%s: %s", username, e.orig)
            raise ConflictError("Username already exists") from e
        self.session.refresh(user)
        return user

    def list_users(self) -> list[User]:
        return self.session.query(User).order_by(User.id).all()
