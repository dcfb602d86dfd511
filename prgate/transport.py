"""
Async HTTP Transport for the GitHub REST and GraphQL APIs.

Handles authentication headers, request/response logging and parsing of
error responses into typed exceptions using httpx async client.
"""

import time
from collections.abc import Callable, Coroutine
from typing import Any

import httpx

from prgate.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    GitHubError,
    GraphQLError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from prgate.logging import log_http_request, log_http_response

API_VERSION = "2022-11-28"


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for GitHub.

    Handles:
    - Bearer token authentication and API version headers
    - REST requests against ``base_url``
    - GraphQL queries and mutations against ``graphql_url``
    - Error response parsing into typed exceptions

    No retries are performed: a failed call surfaces to the caller as a
    ``GitHubError`` subclass.
    """

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.github.com",
        graphql_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            token: GitHub token used for every request
            base_url: Base URL for REST requests (e.g., "https://api.github.com")
            graphql_url: GraphQL endpoint (default: ``{base_url}/graphql``)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the network in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.graphql_url = graphql_url or f"{self.base_url}/graphql"
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
            },
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def rest_request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make a REST request.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/octo/hello/labels")
            params: Query parameters
            body: JSON request body

        Returns:
            Parsed JSON response

        Raises:
            GitHubError: On API errors
        """
        async def make_request() -> httpx.Response:
            return await self._client.request(method, path, params=params, json=body)

        log_http_request(method, f"{self.base_url}{path}", body=body)
        return await self._execute(make_request)

    async def graphql(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Run a GraphQL query or mutation.

        Args:
            query: GraphQL document
            variables: Variables for the document

        Returns:
            The ``data`` object of the response

        Raises:
            GraphQLError: If the response carries an ``errors`` array
            GitHubError: On HTTP-level API errors
        """
        body = {"query": query, "variables": variables or {}}

        async def make_request() -> httpx.Response:
            return await self._client.post(self.graphql_url, json=body)

        log_http_request("POST", self.graphql_url, body={"variables": variables or {}})
        response = await self._execute(make_request)

        errors = response.get("errors")
        if errors:
            raise self._parse_graphql_errors(errors)

        data = response.get("data") or {}
        if not isinstance(data, dict):
            raise ServerError("INVALID_RESPONSE", "GitHub API error: GraphQL data is not an object")
        return data

    async def _execute(
        self, request_fn: Callable[[], Coroutine[Any, Any, httpx.Response]]
    ) -> dict[str, Any]:
        """
        Execute a request and parse its response.

        Args:
            request_fn: Async function that makes the HTTP request

        Returns:
            Parsed JSON response (empty dict for empty bodies)

        Raises:
            GitHubError: On error responses, connection failures or non-JSON bodies
        """
        started = time.monotonic()
        try:
            response = await request_fn()
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", f"GitHub API error: {e}") from e

        elapsed_ms = (time.monotonic() - started) * 1000
        log_http_response(response.status_code, str(response.request.url), elapsed_ms=elapsed_ms)

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        if not response.content:
            return {}

        try:
            data = response.json()
        except ValueError as e:
            raise ServerError(
                "INVALID_RESPONSE",
                f"GitHub API error: response from {response.request.url} is not JSON",
                response.headers.get("X-GitHub-Request-Id"),
            ) from e
        if not isinstance(data, dict):
            raise ServerError(
                "INVALID_RESPONSE",
                f"GitHub API error: expected a JSON object from {response.request.url}",
                response.headers.get("X-GitHub-Request-Id"),
            )
        return data

    def _parse_error_response(self, response: httpx.Response) -> GitHubError:
        """
        Parse an error response into a typed exception.

        GitHub error bodies look like
        ``{"message": ..., "errors": [{"resource": ..., "code": ...}]}``.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate GitHubError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        message = f"GitHub API error: {data.get('message', f'HTTP {response.status_code}')}"
        request_id = response.headers.get("X-GitHub-Request-Id")
        error_codes = [
            error.get("code")
            for error in data.get("errors", [])
            if isinstance(error, dict)
        ]

        status_code = response.status_code

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403:
            if response.headers.get("X-RateLimit-Remaining") == "0":
                return RateLimitedError("RATE_LIMITED", message, self._retry_after(response), request_id)
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code == 422 and "already_exists" in error_codes:
            return AlreadyExistsError("ALREADY_EXISTS", message, request_id)
        elif status_code == 429:
            return RateLimitedError("RATE_LIMITED", message, self._retry_after(response), request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ValidationError("VALIDATION_FAILED", message, request_id)

    def _parse_graphql_errors(self, errors: list[dict[str, Any]]) -> GraphQLError:
        """Collapse a GraphQL ``errors`` array into a single exception."""
        first = errors[0] if isinstance(errors[0], dict) else {}
        code = first.get("type") or "GRAPHQL_ERROR"
        messages = "; ".join(
            str(error.get("message", "unknown error"))
            for error in errors
            if isinstance(error, dict)
        )
        return GraphQLError(code, f"GitHub API error: {messages}", errors=errors)

    @staticmethod
    def _retry_after(response: httpx.Response) -> int:
        retry_after_str = response.headers.get("Retry-After", "60")
        try:
            return int(retry_after_str)
        except ValueError:
            return 60
