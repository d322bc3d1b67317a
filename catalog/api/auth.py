"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog.api.dependencies import get_settings_from_context
from catalog.config import Settings
from catalog.database import get_db
from catalog.exceptions import AuthError
from catalog.schemas.auth import MessageResponse, TokenResponse, UserLogin, UserRegister
from catalog.services.auth import authenticate_user, create_access_token, create_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    create_user(db, user_data.email, user_data.password)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings_from_context)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        logger.info("Rejected login with invalid credentials")
        raise AuthError("Invalid credentials")

    return TokenResponse(token=create_access_token(user.id, user.email, settings))
