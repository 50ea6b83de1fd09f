"""
Persistence layer: declarative base, connection settings, per-request sessions and
the ORM models (imported here so Base.metadata knows every table).
"""

from .base import Base
from .config import Settings, get_settings
from .session import get_async_session
from . import models as models  # noqa: F401

__all__ = ["Base", "Settings", "get_settings", "get_async_session", "models"]
