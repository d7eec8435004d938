"""
Bling Repository

Authenticated HTTP transport shared by every entity client of a facade.
"""

import logging
import time
from typing import Any

import httpx

from .core.config_store import validate_settings
from .core.models import APIError, ClientSettings, ConfigurationError

logger = logging.getLogger(__name__)

_MAX_TOKEN_LENGTH = 4096


class BlingRepository:
    """
    HTTP transport for the Bling v3 API.

    Features:
    - Bearer token authentication on every request
    - Built-in retries for transient failures (5xx, 429, network errors)
    - Normalized error reporting through APIError
    """

    def __init__(
        self,
        access_token: str,
        settings: ClientSettings | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the repository.

        Args:
            access_token: Bling OAuth access token
            settings: Connection settings (defaults if None)
            http_client: Optional httpx client (created if None)

        Raises:
            ConfigurationError: If the access token is missing or malformed,
                or the settings cannot drive requests
        """
        if not isinstance(access_token, str) or not access_token.strip():
            raise ConfigurationError("An access token is required to connect to Bling")
        if len(access_token) > _MAX_TOKEN_LENGTH or any(c.isspace() for c in access_token.strip()):
            raise ConfigurationError("The access token is malformed")

        self._access_token = access_token.strip()
        self.settings = validate_settings(settings or ClientSettings())

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(timeout=self.settings.timeout_seconds)
        else:
            self.http_client = http_client

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
        return False

    def __repr__(self) -> str:
        return f"BlingRepository(base_url={self.settings.base_url!r})"

    def _build_url(self, path: str) -> str:
        """
        Build full URL from base URL and path.

        Args:
            path: API path (e.g., "/contatos")

        Returns:
            Full URL
        """
        base_url = self.settings.base_url.rstrip("/")
        path = path.lstrip("/")
        return f"{base_url}/{path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _error_from_response(response: httpx.Response) -> APIError:
        """Build an APIError from a Bling error response."""
        error_type = None
        description = None
        fields = None
        message = response.text

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            error = payload["error"]
            error_type = error.get("type")
            description = error.get("description")
            fields = error.get("fields")
            message = error.get("message") or description or message

        return APIError(
            f"API request failed: {response.status_code} {message}",
            status_code=response.status_code,
            error_type=error_type,
            description=description,
            fields=fields,
        )

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make an authenticated HTTP request with retry logic.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path
            params: Query parameters
            json_body: JSON request body

        Returns:
            Response JSON as dict ({} for empty bodies)

        Raises:
            APIError: On non-2xx response after retries
        """
        url = self._build_url(path)
        headers = self._headers()

        last_error = None
        for attempt in range(self.settings.max_retries):
            logger.debug(f"{method} {url} (attempt {attempt + 1})")
            try:
                response = self.http_client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    params=params,
                    json=json_body,
                )

                if 200 <= response.status_code < 300:
                    return response.json() if response.content else {}

                # Rate limited - retry
                if response.status_code == 429:
                    last_error = self._error_from_response(response)

                # Other 4xx errors - don't retry, fail immediately
                elif 400 <= response.status_code < 500:
                    raise self._error_from_response(response)

                # 5xx errors - retry
                else:
                    last_error = self._error_from_response(response)

            except httpx.RequestError as e:
                last_error = APIError(f"Request failed: {str(e)}")

            if attempt < self.settings.max_retries - 1:
                logger.warning(f"{method} {path} failed ({last_error}); retrying")
                time.sleep(2 ** attempt)

        raise last_error or APIError("Request failed after retries")

    # ===== RESOURCE METHODS =====

    def index(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """List resources under a path."""
        return self._request("GET", path, params=params)

    def show(
        self,
        path: str,
        resource_id: int | str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Get a single resource."""
        return self._request("GET", f"{path.rstrip('/')}/{resource_id}", params=params)

    def store(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        """Create a resource."""
        return self._request("POST", path, json_body=body)

    def update(self, path: str, resource_id: int | str, body: dict[str, Any]) -> dict[str, Any]:
        """Replace a resource (PUT)."""
        return self._request("PUT", f"{path.rstrip('/')}/{resource_id}", json_body=body)

    def modify(self, path: str, resource_id: int | str, body: dict[str, Any]) -> dict[str, Any]:
        """Partially update a resource (PATCH)."""
        return self._request("PATCH", f"{path.rstrip('/')}/{resource_id}", json_body=body)

    def destroy(self, path: str, resource_id: int | str) -> dict[str, Any]:
        """Delete a resource."""
        return self._request("DELETE", f"{path.rstrip('/')}/{resource_id}")
