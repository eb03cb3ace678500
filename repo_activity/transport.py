"""
HTTP Transport for the GitHub REST API.

Handles HTTP communication, credential headers, Link header pagination and
error handling. Requests are made once; there is no retry logic.
"""

import time
from typing import Any

import httpx

from repo_activity.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitedError,
    RepoActivityError,
    ServerError,
    ValidationError,
)
from repo_activity.logging import log_http_request, log_http_response

DEFAULT_USER_AGENT = "github-repo-activity"
API_VERSION = "2022-11-28"


class HTTPTransport:
    """
    HTTP transport layer for GitHub API requests.

    Handles:
    - Bearer token authentication (anonymous when no token is given)
    - Error response parsing into typed exceptions
    - Next page discovery from the ``Link`` response header
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: API token; requests are anonymous when None
            timeout: Request timeout in seconds (default: no timeout)
            user_agent: User-Agent header value
            client: Preconfigured httpx client (mainly for tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": user_agent,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
        )
        if client is not None:
            self._client.headers.update(headers)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> tuple[Any, httpx.Response]:
        """
        Make a GET request.

        Args:
            path: API path (e.g., "/search/issues")
            params: Query parameters

        Returns:
            Parsed JSON body and the raw response (for headers)

        Raises:
            RepoActivityError: On API or connection errors
        """
        log_http_request("GET", f"{self.base_url}{path}", self._client.headers, params)

        started = time.monotonic()
        try:
            response = self._client.get(path, params=params)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        log_http_response(
            response.status_code,
            str(response.request.url),
            elapsed_ms=(time.monotonic() - started) * 1000,
            rate_limit_remaining=response.headers.get("X-RateLimit-Remaining"),
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        try:
            return response.json(), response
        except ValueError as e:
            raise ServerError(
                "INVALID_RESPONSE", f"HTTP {response.status_code}: response is not JSON"
            ) from e

    @staticmethod
    def next_page(response: httpx.Response) -> int | None:
        """
        Page number of the next page, read from the ``Link`` header.

        Returns:
            The ``page`` parameter of the ``rel="next"`` link, or None on the last page
        """
        next_link = response.links.get("next")
        if not next_link or "url" not in next_link:
            return None

        page = httpx.URL(next_link["url"]).params.get("page")
        try:
            return int(page) if page is not None else None
        except ValueError:
            return None

    def _parse_error_response(self, response: httpx.Response) -> RepoActivityError:
        """
        Parse an error response into a typed exception.

        GitHub error bodies look like ``{"message": "...", "documentation_url": "..."}``.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate RepoActivityError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        message = data.get("message") or f"HTTP {response.status_code}"
        errors = data.get("errors")
        if isinstance(errors, list) and errors:
            details = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            message = f"{message}: {details}"

        code = f"HTTP_{response.status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")
        status_code = response.status_code

        if status_code == 401:
            return AuthenticationError(code, message, request_id)
        elif status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0":
            return RateLimitedError(code, message, self._retry_after(response), request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, request_id)
        elif status_code == 429:
            return RateLimitedError(code, message, self._retry_after(response), request_id)
        elif status_code >= 500:
            return ServerError(code, message, request_id)
        else:
            return ValidationError(code, message, request_id)

    @staticmethod
    def _retry_after(response: httpx.Response) -> int:
        """Seconds until the rate limit resets, from Retry-After or X-RateLimit-Reset."""
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None:
            try:
                return int(retry_after)
            except ValueError:
                pass

        reset = response.headers.get("X-RateLimit-Reset")
        if reset is not None:
            try:
                return max(int(reset) - int(time.time()), 0)
            except ValueError:
                pass

        return 60
