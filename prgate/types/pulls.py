"""Pull request data models."""

from dataclasses import dataclass, field
from enum import Enum

from prgate.types.labels import Label


class Mergeability(Enum):
    """Tri-state mergeability as reported by GitHub.

    GitHub computes mergeability asynchronously, so a freshly pushed pull
    request is often reported as ``UNKNOWN``.
    """

    MERGEABLE = "mergeable"
    CONFLICTING = "conflicting"
    UNKNOWN = "unknown"

    @classmethod
    def from_payload(cls, value: bool | None) -> "Mergeability":
        """Map the event payload's ``true`` / ``false`` / ``null``."""
        if value is None:
            return cls.UNKNOWN
        return cls.MERGEABLE if value else cls.CONFLICTING


@dataclass(frozen=True)
class Repository:
    """Repository coordinates used to address label calls."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class PullRequestSnapshot:
    """Read-only view of one pull request at evaluation time."""

    id: str  # GraphQL node id
    number: int
    title: str
    description: str | None
    mergeable: Mergeability
    repository: Repository
    is_draft: bool = False
    labels: tuple[Label, ...] = field(default_factory=tuple)

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]
