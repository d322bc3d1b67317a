"""Project API endpoints."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from catalog.api.dependencies import get_current_identity
from catalog.database import get_db
from catalog.exceptions import ValidationError
from catalog.schemas.auth import MessageResponse, TokenIdentity
from catalog.schemas.project import ProjectCreate, ProjectCreated, ProjectResponse
from catalog.services.projects import create_project, list_projects, star_project

router = APIRouter(prefix="/api/projects", tags=["projects"])


async def get_project_data(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    request: Request,
) -> ProjectCreate:
    """Parse the project body after the token gate has accepted the caller."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError("Invalid JSON body") from e

    try:
        return ProjectCreate.model_validate(payload)
    except PydanticValidationError as e:
        raise RequestValidationError(e.errors()) from e


@router.get("", response_model=list[ProjectResponse])
def get_projects(
    db: Annotated[Session, Depends(get_db)],
):
    """Get all projects, newest first."""
    return list_projects(db)


@router.post(
    "",
    response_model=ProjectCreated,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ProjectCreate.model_json_schema()}},
        }
    },
)
def post_project(
    project_data: Annotated[ProjectCreate, Depends(get_project_data)],
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a project owned by the caller."""
    project = create_project(
        db,
        user_id=identity.user_id,
        title=project_data.title,
        description=project_data.description,
        tags=project_data.tags,
    )
    return ProjectCreated(id=project.id)


@router.post("/{project_id}/star", response_model=MessageResponse)
def post_star(
    project_id: int,
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Star a project. Unknown ids are accepted and change nothing."""
    star_project(db, project_id)
    return MessageResponse(message="Project starred successfully")
