"""
Async REST client for the translation platform API.

`ApiClient` is a thin transport over `httpx.AsyncClient`: every method call
issues exactly one HTTP request and returns the parsed JSON body. There is no
retry, caching or batching; callers handle failures themselves by inspecting
`ApiClientError.status`.

Usage:
    async with ApiClient("https://example.org") as api:
        await api.auth.login("user@example.com", "secret")
        languages = await api.languages.find_all()
"""

from typing import Any

import httpx

from src.client.auth import Auth
from src.client.languages import Languages
from src.core.config import settings
from src.core.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class ApiClientError(Exception):
    """
    Raised when the API answers with a non-2xx status.

    Attributes:
        path: Request path, e.g. "/api/auth/login"
        status: HTTP status code
        body: Parsed JSON error body, raw text, or None if empty
    """

    def __init__(self, path: str, status: int, body: Any = None):
        self.path = path
        self.status = status
        self.body = body
        super().__init__(f"Request to {path} failed with status {status}{self._detail()}")

    def _detail(self) -> str:
        if isinstance(self.body, dict):
            message = self.body.get("message") or self.body.get("detail")
            if isinstance(message, str) and message:
                return f": {message}"
        elif isinstance(self.body, str) and self.body.strip():
            return f": {self.body.strip()[:200]}"
        return ""

    @property
    def is_unauthorized(self) -> bool:
        return self.status == 401

    @property
    def is_forbidden(self) -> bool:
        return self.status == 403

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


# =============================================================================
# Client
# =============================================================================


class ApiClient:
    """
    REST client with one attribute per resource group.

    Attributes:
        auth: Session, login, logout and invite endpoints
        languages: Language, import and member endpoints
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        cookies: dict[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API origin; defaults to settings.api_base_url
            timeout: Request timeout in seconds; defaults to settings.api_timeout
            cookies: Cookies to send with every request (e.g. the session cookie)
            http_client: Pre-configured client to use instead of creating one.
                The caller keeps ownership and must close it.
        """
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=base_url or settings.api_base_url,
                timeout=timeout if timeout is not None else settings.api_timeout,
                cookies=cookies,
            )
            self._owns_client = True
        else:
            if cookies:
                http_client.cookies.update(cookies)
            self._owns_client = False
        self._client = http_client
        self._set_cookies = httpx.Cookies()

        self.auth = Auth(self)
        self.languages = Languages(self)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    @property
    def cookies(self) -> httpx.Cookies:
        """Cookie jar, including any cookies set by API responses."""
        return self._client.cookies

    @property
    def set_cookies(self) -> httpx.Cookies:
        """Only the cookies that API responses have set on this client."""
        return self._set_cookies

    # === Request helpers ===
    async def get(self, path: str, query: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, query=query)

    async def post(
        self,
        path: str,
        body: Any = None,
        query: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("POST", path, query=query, body=body)

    async def patch(
        self,
        path: str,
        body: Any = None,
        query: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("PATCH", path, query=query, body=body)

    async def delete(self, path: str, query: dict[str, Any] | None = None) -> Any:
        return await self.request("DELETE", path, query=query)

    async def request(
        self,
        method: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """
        Issue a single request and parse the response.

        Args:
            method: HTTP verb
            path: Path relative to the base URL
            query: Query string parameters
            body: JSON-serializable request body; omitted when None

        Returns:
            Parsed JSON body, response text for non-JSON bodies, or None
            when the response is empty

        Raises:
            ApiClientError: On a non-2xx response
            httpx.HTTPError: On transport failures (connection, timeout)
        """
        kwargs: dict[str, Any] = {}
        if query is not None:
            kwargs["params"] = query
        if body is not None:
            kwargs["json"] = body

        response = await self._client.request(method, path, **kwargs)
        logger.debug("API request", method=method, path=path, status=response.status_code)
        self._set_cookies.update(response.cookies)

        parsed = self._parse_body(response)
        if not response.is_success:
            logger.warning(
                "API request failed",
                method=method,
                path=path,
                status=response.status_code,
            )
            raise ApiClientError(path, response.status_code, parsed)

        return parsed

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            try:
                return response.json()
            except ValueError:
                return response.text
        return response.text
