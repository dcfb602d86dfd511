"""Label data models and the managed label catalogue."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Label:
    """A label attached to a pull request or defined on a repository."""

    id: str  # GraphQL node id
    name: str


class ManagedLabel(Enum):
    """Status labels created and removed by the gate.

    Each member carries the label's display name, color and description.
    Labels whose name is not one of these display names are never touched.
    """

    TITLE_FORMAT = ("Fix Title Format", "ff0000", "Title does not match the required format")
    DESCRIPTION_FORMAT = ("Fix Description Format", "ff0000", "Description does not match the required format")
    TITLE_LENGTH = ("Title Too Small", "ff0000", "Title is shorter than the required length")
    DESCRIPTION_LENGTH = ("Description Too Small", "ff0000", "Description is shorter than the required length")
    MERGE_CONFLICT = ("Merge Conflict", "ff0000", "Pull request has merge conflicts")
    VERIFIED = ("Verified", "0e8a16", "Pull request passes all compliance rules")

    def __init__(self, display_name: str, color: str, description: str) -> None:
        self.display_name = display_name
        self.color = color
        self.description = description

    @classmethod
    def from_name(cls, name: str) -> "ManagedLabel | None":
        """Look up a managed label by exact display name."""
        for label in cls:
            if label.display_name == name:
                return label
        return None


MANAGED_LABEL_NAMES: frozenset[str] = frozenset(label.display_name for label in ManagedLabel)


def is_managed(name: str) -> bool:
    """Return True if a label name belongs to the managed namespace."""
    return name in MANAGED_LABEL_NAMES
