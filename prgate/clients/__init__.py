"""prgate async resource clients."""

from prgate.clients.labels import AsyncLabelsClient
from prgate.clients.pulls import AsyncPullsClient

__all__ = [
    "AsyncLabelsClient",
    "AsyncPullsClient",
]
