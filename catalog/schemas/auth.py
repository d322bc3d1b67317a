"""Authentication schemas."""

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """User registration request."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Login response carrying the bearer token."""

    token: str


class TokenIdentity(BaseModel):
    """Identity carried inside a verified bearer token."""

    user_id: int
    email: str


class MessageResponse(BaseModel):
    """Plain confirmation response."""

    message: str
