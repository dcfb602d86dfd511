"""
Tests for the async HTTP transport.

Feature: prgate
"""

import json
from unittest.mock import MagicMock

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from prgate.exceptions import (
    AlreadyExistsError,
    GraphQLError,
    RateLimitedError,
    ServerError,
)
from prgate.transport import API_VERSION, AsyncHTTPTransport

# Status code to exception type mapping for property test
STATUS_CODE_TO_EXCEPTION = {
    401: "AuthenticationError",
    403: "AuthorizationError",
    404: "NotFoundError",
    422: "ValidationError",
    400: "ValidationError",
    429: "RateLimitedError",
    500: "ServerError",
    502: "ServerError",
    503: "ServerError",
}


def _mock_response(status_code: int, body: dict, headers: dict | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.headers = headers or {}
    return response


@given(
    status_code=st.sampled_from(sorted(STATUS_CODE_TO_EXCEPTION)),
    error_message=st.text(min_size=1, max_size=200),
    request_id=st.text(min_size=1, max_size=50, alphabet=st.characters(
        whitelist_categories=("Lu", "Ll", "Nd"),
        whitelist_characters="-:"
    )),
    retry_after=st.integers(min_value=1, max_value=3600),
)
@settings(max_examples=100)
def test_property_error_response_parsing(
    status_code: int,
    error_message: str,
    request_id: str,
    retry_after: int,
) -> None:
    """
    Every error response becomes a typed exception carrying the API message
    and GitHub's request id, and rate limits carry retry_after.
    """
    transport = AsyncHTTPTransport(token="test-token")
    mock_response = _mock_response(
        status_code,
        {"message": error_message, "documentation_url": "https://docs.github.com"},
        {"X-GitHub-Request-Id": request_id, "Retry-After": str(retry_after)},
    )

    error = transport._parse_error_response(mock_response)

    expected_type = STATUS_CODE_TO_EXCEPTION[status_code]
    assert type(error).__name__ == expected_type
    assert error.message == f"GitHub API error: {error_message}"
    assert error.request_id == request_id

    if status_code == 429:
        assert isinstance(error, RateLimitedError)
        assert error.retry_after == retry_after


def test_already_exists_is_detected() -> None:
    transport = AsyncHTTPTransport(token="test-token")
    mock_response = _mock_response(
        422,
        {
            "message": "Validation Failed",
            "errors": [{"resource": "Label", "code": "already_exists", "field": "name"}],
        },
    )

    error = transport._parse_error_response(mock_response)

    assert isinstance(error, AlreadyExistsError)
    assert error.code == "ALREADY_EXISTS"


def test_exhausted_rate_limit_on_403() -> None:
    transport = AsyncHTTPTransport(token="test-token")
    mock_response = _mock_response(
        403,
        {"message": "API rate limit exceeded"},
        {"X-RateLimit-Remaining": "0", "Retry-After": "30"},
    )

    error = transport._parse_error_response(mock_response)

    assert isinstance(error, RateLimitedError)
    assert error.retry_after == 30


def test_unparseable_error_body() -> None:
    transport = AsyncHTTPTransport(token="test-token")
    mock_response = _mock_response(502, {})
    mock_response.json.side_effect = ValueError("not json")

    error = transport._parse_error_response(mock_response)

    assert isinstance(error, ServerError)
    assert error.message == "GitHub API error: HTTP 502"


@pytest.mark.asyncio
class TestAsyncHTTPTransport:
    """Request-level tests against a stubbed network."""

    async def test_rest_request_sends_auth_headers(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"node_id": "LA_1", "name": "Verified"})

        async with AsyncHTTPTransport(
            token="ghp_secret", transport=httpx.MockTransport(handler)
        ) as transport:
            data = await transport.rest_request(
                "POST", "/repos/octo/hello/labels", body={"name": "Verified"}
            )

        assert data == {"node_id": "LA_1", "name": "Verified"}
        request = seen[0]
        assert request.url == "https://api.github.com/repos/octo/hello/labels"
        assert request.headers["Authorization"] == "Bearer ghp_secret"
        assert request.headers["X-GitHub-Api-Version"] == API_VERSION
        assert json.loads(request.content) == {"name": "Verified"}

    async def test_rest_error_raises_typed_exception(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                422,
                json={
                    "message": "Validation Failed",
                    "errors": [{"resource": "Label", "code": "already_exists"}],
                },
            )

        async with AsyncHTTPTransport(
            token="t", transport=httpx.MockTransport(handler)
        ) as transport:
            with pytest.raises(AlreadyExistsError):
                await transport.rest_request("POST", "/repos/octo/hello/labels", body={})

    async def test_graphql_returns_data(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": {"viewer": {"login": "octocat"}}})

        async with AsyncHTTPTransport(
            token="t",
            base_url="https://ghe.example.com/api/v3",
            graphql_url="https://ghe.example.com/api/graphql",
            transport=httpx.MockTransport(handler),
        ) as transport:
            data = await transport.graphql("query { viewer { login } }", {"a": 1})

        assert data == {"viewer": {"login": "octocat"}}
        assert seen[0].url == "https://ghe.example.com/api/graphql"
        assert json.loads(seen[0].content) == {
            "query": "query { viewer { login } }",
            "variables": {"a": 1},
        }

    async def test_graphql_errors_raise(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "data": None,
                    "errors": [
                        {"type": "FORBIDDEN", "message": "Resource not accessible by integration"},
                        {"message": "second problem"},
                    ],
                },
            )

        async with AsyncHTTPTransport(
            token="t", transport=httpx.MockTransport(handler)
        ) as transport:
            with pytest.raises(GraphQLError) as exc_info:
                await transport.graphql("mutation { x }")

        error = exc_info.value
        assert error.code == "FORBIDDEN"
        assert "Resource not accessible by integration; second problem" in error.message
        assert len(error.errors) == 2

    async def test_connection_error_becomes_server_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with AsyncHTTPTransport(
            token="t", transport=httpx.MockTransport(handler)
        ) as transport:
            with pytest.raises(ServerError) as exc_info:
                await transport.rest_request("GET", "/rate_limit")

        assert exc_info.value.code == "CONNECTION_ERROR"

    async def test_empty_body_returns_empty_dict(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        async with AsyncHTTPTransport(
            token="t", transport=httpx.MockTransport(handler)
        ) as transport:
            assert await transport.rest_request("DELETE", "/repos/o/r/labels/x") == {}

    async def test_non_json_body_becomes_server_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                text="<html>unicorn</html>",
                headers={"X-GitHub-Request-Id": "ABCD:1234"},
            )

        async with AsyncHTTPTransport(
            token="t", transport=httpx.MockTransport(handler)
        ) as transport:
            with pytest.raises(ServerError) as exc_info:
                await transport.graphql("query { viewer { login } }")

        error = exc_info.value
        assert error.code == "INVALID_RESPONSE"
        assert error.request_id == "ABCD:1234"
        assert "GitHub API error" in error.message

    async def test_non_object_body_becomes_server_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["not", "an", "object"])

        async with AsyncHTTPTransport(
            token="t", transport=httpx.MockTransport(handler)
        ) as transport:
            with pytest.raises(ServerError) as exc_info:
                await transport.rest_request("GET", "/repos/o/r")

        assert exc_info.value.code == "INVALID_RESPONSE"
