"""Async pull requests resource client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prgate.transport import AsyncHTTPTransport


SET_LABELS_MUTATION = """
mutation SetPullRequestLabels($pullRequestId: ID!, $labelIds: [ID!]) {
  updatePullRequest(input: {pullRequestId: $pullRequestId, labelIds: $labelIds}) {
    pullRequest {
      id
    }
  }
}
"""

CONVERT_TO_DRAFT_MUTATION = """
mutation ConvertPullRequestToDraft($pullRequestId: ID!) {
  convertPullRequestToDraft(input: {pullRequestId: $pullRequestId}) {
    pullRequest {
      id
      isDraft
    }
  }
}
"""

GATE_MUTATION = """
mutation GatePullRequest($pullRequestId: ID!, $labelIds: [ID!]) {
  updatePullRequest(input: {pullRequestId: $pullRequestId, labelIds: $labelIds}) {
    pullRequest {
      id
    }
  }
  convertPullRequestToDraft(input: {pullRequestId: $pullRequestId}) {
    pullRequest {
      id
      isDraft
    }
  }
}
"""


class AsyncPullsClient:
    """Async client for pull request mutations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async pulls client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def set_labels(self, pull_request_id: str, label_ids: list[str]) -> None:
        """
        Replace the full label list of a pull request.

        Args:
            pull_request_id: GraphQL node id of the pull request
            label_ids: Node ids of every label the pull request should carry
        """
        await self.transport.graphql(
            SET_LABELS_MUTATION,
            {"pullRequestId": pull_request_id, "labelIds": list(label_ids)},
        )

    async def convert_to_draft(self, pull_request_id: str) -> None:
        """Convert a pull request to draft."""
        await self.transport.graphql(
            CONVERT_TO_DRAFT_MUTATION,
            {"pullRequestId": pull_request_id},
        )

    async def gate(self, pull_request_id: str, label_ids: list[str]) -> None:
        """
        Replace the label list and convert to draft in one GraphQL document.

        Args:
            pull_request_id: GraphQL node id of the pull request
            label_ids: Node ids of every label the pull request should carry
        """
        await self.transport.graphql(
            GATE_MUTATION,
            {"pullRequestId": pull_request_id, "labelIds": list(label_ids)},
        )
