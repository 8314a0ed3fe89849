"""Core app configuration, database and security."""

from ministry_hub.core.config import get_settings, settings
from ministry_hub.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
