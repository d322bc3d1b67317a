"""HTTP client for the project catalog API."""

import logging
from typing import Any

import httpx

from catalog.config import get_settings
from catalog.schemas.project import ProjectResponse

logger = logging.getLogger(__name__)


class CatalogAPIError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CatalogClient:
    """Client with one method per catalog endpoint.

    Pass ``http_client`` to reuse an existing ``httpx.Client`` (for example a
    FastAPI ``TestClient``); it is then left open by ``close``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = (base_url if base_url is not None else get_settings().api_url).rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        fallback_error: str,
        token: str | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = self._client.request(
                method, f"{self.base_url}{path}", json=json, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling {method} {path}: {e}")
            raise

        if response.is_success:
            return response

        try:
            message = response.json().get("error") or fallback_error
        except (ValueError, AttributeError):
            message = fallback_error
        raise CatalogAPIError(message, response.status_code)

    def register(self, email: str, password: str) -> None:
        """Register a new user."""
        self._request(
            "POST",
            "/api/register",
            "Registration failed",
            json={"email": email, "password": password},
        )

    def login(self, email: str, password: str) -> str:
        """Login and return the bearer token."""
        response = self._request(
            "POST",
            "/api/login",
            "Login failed",
            json={"email": email, "password": password},
        )
        return response.json()["token"]

    def get_projects(self) -> list[ProjectResponse]:
        """Get all projects, newest first."""
        response = self._request("GET", "/api/projects", "Failed to fetch projects")
        return [ProjectResponse.model_validate(item) for item in response.json()]

    def create_project(
        self,
        token: str,
        title: str,
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> int:
        """Create a project and return its id."""
        response = self._request(
            "POST",
            "/api/projects",
            "Failed to create project",
            token=token,
            json={"title": title, "description": description, "tags": tags or []},
        )
        return response.json()["id"]

    def star_project(self, token: str, project_id: int) -> None:
        """Star a project."""
        self._request(
            "POST",
            f"/api/projects/{project_id}/star",
            "Failed to star project",
            token=token,
        )
