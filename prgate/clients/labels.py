"""Async labels resource client."""

from typing import TYPE_CHECKING, Any

from prgate.exceptions import ServerError
from prgate.types.labels import Label
from prgate.types.pulls import Repository

if TYPE_CHECKING:
    from prgate.transport import AsyncHTTPTransport


LIST_LABELS_QUERY = """
query RepositoryLabels($owner: String!, $name: String!, $cursor: String) {
  repository(owner: $owner, name: $name) {
    labels(first: 100, after: $cursor) {
      nodes {
        id
        name
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""


class AsyncLabelsClient:
    """Async client for repository label operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async labels client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def create(
        self,
        repository: Repository,
        name: str,
        color: str,
        description: str | None = None,
    ) -> Label | None:
        """
        Create a label on a repository.

        Args:
            repository: Repository coordinates
            name: Label name
            color: Hex color without the leading ``#``
            description: Optional label description

        Returns:
            The created Label, or None if the response omits its node id

        Raises:
            AlreadyExistsError: If a label with this name already exists
        """
        body: dict[str, str] = {"name": name, "color": color}
        if description:
            body["description"] = description

        data = await self.transport.rest_request(
            method="POST",
            path=f"/repos/{repository.owner}/{repository.name}/labels",
            body=body,
        )
        node_id = data.get("node_id")
        if not isinstance(node_id, str):
            return None
        return Label(id=node_id, name=data.get("name") or name)

    async def list(self, repository: Repository) -> list[Label]:
        """
        List every label defined on a repository, following pagination.

        Args:
            repository: Repository coordinates

        Returns:
            Labels in the order GitHub returns them

        Raises:
            ServerError: If a label node is missing its id or name
        """
        labels: list[Label] = []
        cursor: str | None = None

        while True:
            data = await self.transport.graphql(
                LIST_LABELS_QUERY,
                {"owner": repository.owner, "name": repository.name, "cursor": cursor},
            )
            connection = self._labels_connection(data)
            labels.extend(
                self._parse_label(node)
                for node in connection.get("nodes") or []
                if node
            )

            page_info = connection.get("pageInfo") or {}
            if not isinstance(page_info, dict) or not page_info.get("hasNextPage"):
                return labels
            cursor = page_info.get("endCursor")

    @staticmethod
    def _labels_connection(data: dict[str, Any]) -> dict[str, Any]:
        repository = data.get("repository") or {}
        connection = repository.get("labels") if isinstance(repository, dict) else None
        if connection is None:
            connection = {}
        if not isinstance(connection, dict):
            raise ServerError("INVALID_RESPONSE", "GitHub API error: malformed labels connection")
        return connection

    @staticmethod
    def _parse_label(node: Any) -> Label:
        if not isinstance(node, dict) or not isinstance(node.get("id"), str) or not isinstance(node.get("name"), str):
            raise ServerError("INVALID_RESPONSE", f"GitHub API error: malformed label node {node!r}")
        return Label(id=node["id"], name=node["name"])
