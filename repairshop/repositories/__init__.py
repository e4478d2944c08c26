"""Persistence adapters used by the services."""

from repairshop.repositories.users import SqlUserRepository, UserRepository

__all__ = ["SqlUserRepository", "UserRepository"]
