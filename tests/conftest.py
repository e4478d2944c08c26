"""
Shared test setup.

repairshop.main builds a module-level app from the environment, and a
missing JWT_SECRET is a fatal startup error, so the variables must be set
before any test module imports it. Tests build their own Settings and apps
on in-memory SQLite; these values only satisfy that import.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production-use-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
