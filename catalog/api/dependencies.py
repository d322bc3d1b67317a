"""FastAPI dependencies for authentication and application context."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from catalog.config import Settings
from catalog.context import AppContext
from catalog.exceptions import AuthError
from catalog.schemas.auth import TokenIdentity
from catalog.services.auth import verify_access_token

# Missing credentials are reported by get_current_identity as a 401
security = HTTPBearer(auto_error=False)


def get_context(request: Request) -> AppContext:
    """Get the application context created at startup."""
    return request.app.state.context


def get_settings_from_context(
    context: Annotated[AppContext, Depends(get_context)],
) -> Settings:
    """Get the settings the running application was built with."""
    return context.settings


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings_from_context)],
) -> TokenIdentity:
    """Get the caller's identity from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token required")

    return verify_access_token(credentials.credentials, settings)
