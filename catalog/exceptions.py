"""Application error types.

Every error carries the message returned to HTTP callers as ``{"error": message}``
and the status code it maps to.
"""

from fastapi import status


class CatalogError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Missing or conflicting input, such as a duplicate email."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(CatalogError):
    """Bad credentials or a missing bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidTokenError(AuthError):
    """A bearer token that is malformed, expired or badly signed."""

    status_code = status.HTTP_403_FORBIDDEN


class StoreError(CatalogError):
    """Unexpected persistence failure. The message never includes store details."""
