"""
Pytest fixtures for prgate testing.

Provides snapshot builders, rule sets and a mock client for tests of code
that drives the gate.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Generator

import pytest

from prgate.testing.mock import MockGitHubClient
from prgate.types.labels import Label
from prgate.types.pulls import Mergeability, PullRequestSnapshot, Repository
from prgate.types.rules import RuleSet


# ============================================================================
# Helper Functions (for use outside fixtures)
# ============================================================================


def create_snapshot(
    title: str = "Fix: update docs",
    description: str | None = "Updated the documentation for clarity.",
    mergeable: Mergeability = Mergeability.MERGEABLE,
    labels: Iterable[Label] = (),
    pull_request_id: str = "PR_kwDOtest0001",
    number: int = 1,
    is_draft: bool = False,
    repository: Repository | None = None,
) -> PullRequestSnapshot:
    """
    Create a PullRequestSnapshot with sensible defaults.

    Example:
        ```python
        from prgate.testing import create_snapshot

        snapshot = create_snapshot(title="fix", mergeable=Mergeability.UNKNOWN)
        ```
    """
    return PullRequestSnapshot(
        id=pull_request_id,
        number=number,
        title=title,
        description=description,
        mergeable=mergeable,
        repository=repository or Repository(owner="octo-org", name="hello-world"),
        is_draft=is_draft,
        labels=tuple(labels),
    )


def create_event_payload(
    title: str = "Fix: update docs",
    body: str | None = "Updated the documentation for clarity.",
    mergeable: bool | None = True,
    labels: Iterable[Label] = (),
    node_id: str = "PR_kwDOtest0001",
    number: int = 1,
    draft: bool = False,
) -> dict[str, Any]:
    """Create a minimal ``pull_request`` event payload."""
    return {
        "action": "opened",
        "number": number,
        "pull_request": {
            "node_id": node_id,
            "number": number,
            "title": title,
            "body": body,
            "mergeable": mergeable,
            "draft": draft,
            "labels": [{"node_id": label.id, "name": label.name} for label in labels],
        },
        "repository": {
            "name": "hello-world",
            "owner": {"login": "octo-org"},
        },
    }


def create_rule_set(
    title_regex: str = r"^[A-Z].+",
    description_regex: str = r".+",
    title_min_length: int = 5,
    description_min_length: int = 10,
) -> RuleSet:
    """Create a RuleSet from pattern strings."""
    return RuleSet.from_strings(
        title_regex=title_regex,
        description_regex=description_regex,
        title_min_length=title_min_length,
        description_min_length=description_min_length,
    )


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """Provide a MockGitHubClient for testing."""
    client = MockGitHubClient()
    yield client
    client.reset()


@pytest.fixture
def rule_set() -> RuleSet:
    """Rules requiring a capitalised title of 5+ chars and a 10+ char description."""
    return create_rule_set()


@pytest.fixture
def passing_snapshot() -> PullRequestSnapshot:
    """A snapshot that satisfies ``rule_set``."""
    return create_snapshot()


@pytest.fixture
def unmanaged_label() -> Label:
    """A label outside the managed namespace."""
    return Label(id="LA_unmanaged_bug", name="bug")


@pytest.fixture
def event_file(tmp_path: Path) -> Path:
    """Write a passing pull request event to a temp file and return its path."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps(create_event_payload()), encoding="utf-8")
    return path
