"""
ORM models for tenant-owned domain entities.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .client import Client  # noqa: F401
