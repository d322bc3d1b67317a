"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base: Any = declarative_base()

SAMPLE_PROJECTS = [
    {
        "user_id": 1,
        "title": "AI Code Assistant",
        "description": "An intelligent coding assistant powered by machine learning",
        "tags": ["AI", "Machine Learning", "TypeScript"],
        "stars": 42,
    },
    {
        "user_id": 1,
        "title": "Quantum Computing Simulator",
        "description": "A web-based quantum circuit simulator for educational purposes",
        "tags": ["Quantum", "Education", "WebAssembly"],
        "stars": 28,
    },
]


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the given URL."""
    if database_url.startswith("sqlite"):
        # Concurrent writers wait on the file lock instead of failing immediately
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False, "timeout": 30},
        )
    return create_engine(database_url, pool_pre_ping=True, pool_size=5, max_overflow=10)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = request.app.state.context.session_factory()
    try:
        yield db
    finally:
        db.close()


def seed_sample_projects(db: Session) -> int:
    """Insert the sample projects if the projects table is empty.

    Returns the number of rows inserted.
    """
    from catalog.models.project import Project
    from catalog.services.projects import encode_tags

    if db.query(func.count(Project.id)).scalar():
        return 0

    for sample in SAMPLE_PROJECTS:
        db.add(
            Project(
                user_id=sample["user_id"],
                title=sample["title"],
                description=sample["description"],
                tags=encode_tags(sample["tags"]),
                stars=sample["stars"],
            )
        )
    db.commit()
    logger.info(f"Seeded {len(SAMPLE_PROJECTS)} sample projects")
    return len(SAMPLE_PROJECTS)


def init_db(engine: Engine, seed: bool = True) -> None:
    """Create all tables if missing and optionally seed sample projects."""
    # Import all models here so they are registered with Base.metadata
    from catalog import models  # noqa: F401

    Base.metadata.create_all(bind=engine)

    if seed:
        db = create_session_factory(engine)()
        try:
            seed_sample_projects(db)
        finally:
            db.close()
