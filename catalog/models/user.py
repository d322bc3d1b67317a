"""User model."""

from sqlalchemy import Column, Integer, String

from catalog.database import Base
from catalog.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and project ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
