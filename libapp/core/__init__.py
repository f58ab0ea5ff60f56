"""Core app configuration and database."""

from libapp.core.config import get_settings, settings
from libapp.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
