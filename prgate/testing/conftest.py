"""
Pytest plugin for prgate testing fixtures.

Add this to your conftest.py to use the fixtures:

    pytest_plugins = ["prgate.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from prgate.testing.fixtures import (
    event_file,
    mock_client,
    passing_snapshot,
    rule_set,
    unmanaged_label,
)

__all__ = [
    "mock_client",
    "rule_set",
    "passing_snapshot",
    "unmanaged_label",
    "event_file",
]
