"""
Label reconciliation.

Computes the complete label list a pull request should carry: every label
outside the managed namespace is kept as-is and the managed labels are
replaced wholesale by the ones the current evaluation calls for.
"""

import asyncio
from collections.abc import Iterable
from typing import TYPE_CHECKING

from prgate.exceptions import AlreadyExistsError, GitHubError
from prgate.logging import get_logger
from prgate.types.labels import Label, ManagedLabel, is_managed
from prgate.types.pulls import PullRequestSnapshot, Repository
from prgate.types.rules import Violation

if TYPE_CHECKING:
    from prgate.client import AsyncGitHubClient

logger = get_logger("reconcile")


class LabelCatalog:
    """Makes sure managed labels exist on a repository before they are applied."""

    def __init__(self, client: "AsyncGitHubClient", repository: Repository) -> None:
        self.client = client
        self.repository = repository

    async def ensure_exists(self, label: ManagedLabel) -> None:
        """
        Create ``label`` on the repository, treating "already exists" as success.

        Other API failures are logged and swallowed; the label then fails to
        resolve later and is left off the pull request.
        """
        try:
            await self.client.labels.create(
                self.repository,
                label.display_name,
                label.color,
                label.description,
            )
            logger.info(f"Created label '{label.display_name}' in {self.repository.full_name}")
        except AlreadyExistsError:
            logger.debug(f"Label '{label.display_name}' already exists in {self.repository.full_name}")
        except GitHubError as e:
            logger.warning(f"Could not create label '{label.display_name}': {e}")


class LabelReconciler:
    """Computes the full replacement label list for a pull request."""

    def __init__(
        self,
        client: "AsyncGitHubClient",
        catalog: LabelCatalog | None = None,
    ) -> None:
        """
        Initialize the reconciler.

        Args:
            client: GitHub client used to list repository labels
            catalog: Label catalog to use (default: one per snapshot repository)
        """
        self.client = client
        self.catalog = catalog

    async def reconcile(
        self,
        snapshot: PullRequestSnapshot,
        violations: list[Violation],
        is_gate_error: bool,
    ) -> list[str]:
        """
        Compute the label ids the pull request must carry after this run.

        Args:
            snapshot: Pull request state, including its current labels
            violations: Violations from the rule evaluation
            is_gate_error: Whether the pull request is being gated

        Returns:
            Unmanaged label ids in their current order followed by the
            resolved managed label ids, without duplicates. This is the
            whole list to assign, not a delta.
        """
        kept = [label for label in snapshot.labels if not is_managed(label.name)]
        dropped = [label.name for label in snapshot.labels if is_managed(label.name)]
        desired = desired_labels(violations, is_gate_error)

        logger.debug(
            f"Reconciling #{snapshot.number}: keep {len(kept)} unmanaged, "
            f"replace {dropped} with {[label.display_name for label in desired]}"
        )

        catalog = self.catalog or LabelCatalog(self.client, snapshot.repository)
        await asyncio.gather(*(catalog.ensure_exists(label) for label in desired))

        resolved = await self._resolve(snapshot.repository, desired)

        label_ids: list[str] = []
        for label_id in [label.id for label in kept] + resolved:
            if label_id not in label_ids:
                label_ids.append(label_id)
        return label_ids

    async def _resolve(
        self,
        repository: Repository,
        desired: list[ManagedLabel],
    ) -> list[str]:
        """Look up node ids for ``desired`` by name, omitting any that cannot be found."""
        if not desired:
            return []

        try:
            catalog = await self.client.labels.list(repository)
        except GitHubError as e:
            logger.warning(f"Could not list labels of {repository.full_name}: {e}")
            return []

        index = index_labels_by_name(catalog)

        resolved = []
        for label in desired:
            label_id = index.get(label.display_name)
            if label_id is None:
                logger.warning(
                    f"Label '{label.display_name}' not found in {repository.full_name}; "
                    "leaving it off the pull request"
                )
                continue
            resolved.append(label_id)
        return resolved


def desired_labels(violations: list[Violation], is_gate_error: bool) -> list[ManagedLabel]:
    """Managed labels for this run, in rule order."""
    if not is_gate_error:
        return [ManagedLabel.VERIFIED]

    desired: list[ManagedLabel] = []
    for violation in violations:
        if violation.rule not in desired:
            desired.append(violation.rule)
    return desired


def index_labels_by_name(labels: Iterable[Label]) -> dict[str, str]:
    """Map label names to node ids. The first label wins if a name repeats."""
    index: dict[str, str] = {}
    for label in labels:
        if label.name in index:
            logger.warning(
                f"Duplicate label name '{label.name}' ({index[label.name]}, {label.id}); "
                "using the first"
            )
            continue
        index[label.name] = label.id
    return index
