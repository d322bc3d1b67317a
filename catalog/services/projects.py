"""Project service for listing, creating and starring projects."""

import json
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.exceptions import StoreError
from catalog.models.project import Project
from catalog.models.user import User
from catalog.schemas.project import ProjectResponse

logger = logging.getLogger(__name__)

ANONYMOUS_CREATOR = "anonymous"

# Integer primary keys are signed 64-bit; ids outside the range cannot match a row
MAX_PROJECT_ID = 2**63 - 1


def encode_tags(tags: list[str] | None) -> str:
    """Serialize tags to the JSON text stored in the tags column."""
    return json.dumps(list(tags or []))


def decode_tags(raw: str | None) -> list[str]:
    """Deserialize the tags column. Empty or unreadable values yield an empty list."""
    if not raw:
        return []
    try:
        tags = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"Ignoring undecodable tags value: {raw!r}")
        return []
    if not isinstance(tags, list):
        logger.warning(f"Ignoring non-list tags value: {raw!r}")
        return []
    return [str(tag) for tag in tags]


def list_projects(db: Session) -> list[ProjectResponse]:
    """Get all projects, newest first, with creator email and contributor count.

    The contributor count is the number of registered users in the whole
    system, repeated on every project.
    """
    contributors = select(func.count(User.id)).scalar_subquery()

    try:
        rows = (
            db.query(
                Project,
                func.coalesce(User.email, ANONYMOUS_CREATOR).label("creator_email"),
                contributors.label("contributors"),
            )
            .outerjoin(User, Project.user_id == User.id)
            .order_by(Project.created_at.desc(), Project.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch projects: {e}")
        raise StoreError("Error fetching projects") from e

    return [
        ProjectResponse(
            id=project.id,
            user_id=project.user_id,
            title=project.title,
            description=project.description,
            tags=decode_tags(project.tags),
            stars=project.stars,
            creator_email=creator_email,
            contributors=contributor_count,
            created_at=project.created_at,
        )
        for project, creator_email, contributor_count in rows
    ]


def create_project(
    db: Session,
    user_id: int,
    title: str,
    description: str | None,
    tags: list[str] | None,
) -> Project:
    """Create a project owned by the given user."""
    project = Project(
        user_id=user_id,
        title=title,
        description=description,
        tags=encode_tags(tags),
    )
    db.add(project)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create project: {e}")
        raise StoreError("Error creating project") from e

    db.refresh(project)
    return project


def star_project(db: Session, project_id: int) -> int:
    """Increment a project's stars by one in a single UPDATE statement.

    Returns the number of rows matched; an unknown id matches nothing and is
    not an error.
    """
    if not -MAX_PROJECT_ID - 1 <= project_id <= MAX_PROJECT_ID:
        logger.info(f"Star ignored for out-of-range project id {project_id}")
        return 0

    try:
        matched = (
            db.query(Project)
            .filter(Project.id == project_id)
            .update({Project.stars: Project.stars + 1}, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to star project {project_id}: {e}")
        raise StoreError("Error starring project") from e

    if not matched:
        logger.info(f"Star ignored for unknown project {project_id}")
    return matched
