"""prgate type definitions.

This module exports all data model types used by the gate.
"""

from prgate.types.labels import MANAGED_LABEL_NAMES, Label, ManagedLabel, is_managed
from prgate.types.pulls import Mergeability, PullRequestSnapshot, Repository
from prgate.types.rules import RuleSet, Violation

__all__ = [
    # Label types
    "Label",
    "ManagedLabel",
    "MANAGED_LABEL_NAMES",
    "is_managed",
    # Pull request types
    "Mergeability",
    "PullRequestSnapshot",
    "Repository",
    # Rule types
    "RuleSet",
    "Violation",
]
