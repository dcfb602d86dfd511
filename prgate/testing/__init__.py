"""prgate testing utilities.

Provides a mock client and fixtures for testing code that runs the gate.
"""

from prgate.testing.fixtures import (
    create_event_payload,
    create_rule_set,
    create_snapshot,
)
from prgate.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_snapshot",
    "create_event_payload",
    "create_rule_set",
]
