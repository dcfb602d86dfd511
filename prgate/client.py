"""
prgate async GitHub client.

Aggregates the resource clients the gate needs on top of one transport.
"""

from typing import Any

import httpx

from prgate.clients import AsyncLabelsClient, AsyncPullsClient
from prgate.config import DEFAULT_API_URL, GateConfig
from prgate.transport import AsyncHTTPTransport


class AsyncGitHubClient:
    """
    Async client for the GitHub API calls made by the gate.

    Example:
        ```python
        import asyncio
        from prgate.client import AsyncGitHubClient
        from prgate.types import Repository

        async def main():
            async with AsyncGitHubClient(token="ghp_...") as client:
                labels = await client.labels.list(Repository("octo", "hello"))

        asyncio.run(main())
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        graphql_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async GitHub client.

        Args:
            token: GitHub token
            base_url: REST API base URL (default: https://api.github.com)
            graphql_url: GraphQL endpoint (default: ``{base_url}/graphql``)
            timeout: Request timeout in seconds (default: 30.0)
            transport: Optional httpx transport, for tests
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            token=token,
            base_url=base_url,
            graphql_url=graphql_url,
            timeout=timeout,
            transport=transport,
        )

        self.labels = AsyncLabelsClient(self._transport)
        self.pulls = AsyncPullsClient(self._transport)

    @classmethod
    def from_config(
        cls,
        config: GateConfig,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "AsyncGitHubClient":
        """Create a client from a loaded GateConfig."""
        return cls(
            token=config.token,
            base_url=config.api_url,
            graphql_url=config.graphql_url,
            timeout=timeout,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
