"""Pydantic schemas for API requests and responses."""

from catalog.schemas.auth import (
    MessageResponse,
    TokenIdentity,
    TokenResponse,
    UserLogin,
    UserRegister,
)
from catalog.schemas.project import ProjectCreate, ProjectCreated, ProjectResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "TokenResponse",
    "TokenIdentity",
    "MessageResponse",
    "ProjectCreate",
    "ProjectCreated",
    "ProjectResponse",
]
