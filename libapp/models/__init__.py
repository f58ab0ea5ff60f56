"""SQLAlchemy ORM models."""

from libapp.models.base import Base
from libapp.models.library import Library
from libapp.models.membership import Membership
from libapp.models.user import User

__all__ = ["Base", "Library", "Membership", "User"]
