"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from repairshop.models.base import Base

ADMIN_ROLE = "admin"
DEFAULT_ROLE = "user"
ROLES: frozenset[str] = frozenset({ADMIN_ROLE, DEFAULT_ROLE})


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. Usernames are case-sensitive and never renamed.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=DEFAULT_ROLE)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
