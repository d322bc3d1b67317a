"""Project schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProjectCreate(BaseModel):
    """Create a new project listing."""

    title: str = Field(..., min_length=1)
    description: str | None = None
    tags: list[str] = Field(default_factory=list)


class ProjectCreated(BaseModel):
    """Response for a newly created project."""

    id: int
    message: str = "Project created successfully"


class ProjectResponse(BaseModel):
    """Project view returned by the listing endpoint."""

    id: int
    user_id: int
    title: str
    description: str | None
    tags: list[str]
    stars: int
    creator_email: str
    contributors: int
    created_at: datetime
