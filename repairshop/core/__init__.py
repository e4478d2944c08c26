"""Core app configuration, database and error types."""

from repairshop.core.config import Settings, get_settings
from repairshop.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
