"""Project model."""

from sqlalchemy import Column, Integer, String, Text

from catalog.database import Base
from catalog.models.mixins import TimestampMixin


class Project(Base, TimestampMixin):
    """Project listing created by a user."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    # No foreign key: listings may outlive or predate their creator row
    user_id = Column(Integer, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    tags = Column(Text, nullable=True)  # JSON array of strings
    stars = Column(Integer, nullable=False, default=0, server_default="0")
