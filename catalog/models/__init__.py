"""SQLAlchemy models."""

from catalog.models.project import Project
from catalog.models.user import User

__all__ = [
    "User",
    "Project",
]
