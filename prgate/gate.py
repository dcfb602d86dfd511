"""
Gate orchestration.

Runs the rules, reconciles labels and issues the single mutation that
applies the outcome to the pull request.
"""

from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from prgate.exceptions import GitHubError, MutationError
from prgate.logging import get_logger
from prgate.reconcile import LabelReconciler
from prgate.rules import RuleEvaluator
from prgate.types.pulls import PullRequestSnapshot
from prgate.types.rules import RuleSet, Violation

if TYPE_CHECKING:
    from prgate.client import AsyncGitHubClient

logger = get_logger("gate")


class GateState(Enum):
    EVALUATING = "evaluating"
    RECONCILING = "reconciling"
    GATING = "gating"
    CLEARING = "clearing"
    DONE = "done"


class GateOutcome(Enum):
    PASS = "pass"
    FAIL = "fail"


@dataclass
class GateResult:
    """
    Outcome of one gate run.

    Attributes:
        outcome: PASS or FAIL
        violations: Violations in rule order (empty on PASS)
        applied_label_ids: The full label list assigned to the pull request
        converted_to_draft: Whether this run converted the pull request to draft
    """

    outcome: GateOutcome
    violations: list[Violation] = field(default_factory=list)
    applied_label_ids: list[str] = field(default_factory=list)
    converted_to_draft: bool = False

    @property
    def passed(self) -> bool:
        return self.outcome is GateOutcome.PASS

    @property
    def message(self) -> str:
        """Violation messages joined by newlines, in rule order."""
        return "\n".join(violation.message for violation in self.violations)

    def __str__(self) -> str:
        if self.passed:
            return "PASSED"
        return f"FAILED: {self.message}"


class GateController:
    """
    Decides whether a pull request passes and applies the outcome.

    A failing pull request gets one label per violated rule and is converted
    to draft. A passing one has its violation labels replaced by ``Verified``;
    it is never taken out of draft.
    """

    def __init__(
        self,
        client: "AsyncGitHubClient",
        rule_set: RuleSet,
        reconciler: LabelReconciler | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            client: GitHub client used for every API call
            rule_set: Rules to evaluate
            reconciler: Label reconciler (default: one built on ``client``)
        """
        self.client = client
        self.evaluator = RuleEvaluator(rule_set)
        self.reconciler = reconciler or LabelReconciler(client)
        self.state = GateState.EVALUATING

    async def run(self, snapshot: PullRequestSnapshot) -> GateResult:
        """
        Evaluate, reconcile and mutate one pull request.

        Args:
            snapshot: Pull request state for this run

        Returns:
            GateResult; rule violations are reported as a FAIL outcome, not raised

        Raises:
            MutationError: If the final label/draft mutation fails
        """
        self.state = GateState.EVALUATING
        violations = self.evaluator.evaluate(snapshot)
        is_gate_error = bool(violations)

        self._transition(GateState.RECONCILING)
        label_ids = await self.reconciler.reconcile(snapshot, violations, is_gate_error)

        if is_gate_error:
            self._transition(GateState.GATING)
            converted = await self._gate(snapshot, label_ids)
            result = GateResult(GateOutcome.FAIL, violations, label_ids, converted)
        else:
            self._transition(GateState.CLEARING)
            await self._apply(self.client.pulls.set_labels, snapshot, label_ids)
            result = GateResult(GateOutcome.PASS, [], label_ids)

        self._transition(GateState.DONE)
        logger.info(f"Pull request #{snapshot.number} {result}")
        return result

    async def _gate(self, snapshot: PullRequestSnapshot, label_ids: list[str]) -> bool:
        # already a draft: only the labels change
        if snapshot.is_draft:
            await self._apply(self.client.pulls.set_labels, snapshot, label_ids)
            return False

        await self._apply(self.client.pulls.gate, snapshot, label_ids)
        return True

    async def _apply(
        self,
        mutation: Callable[[str, list[str]], Awaitable[None]],
        snapshot: PullRequestSnapshot,
        label_ids: list[str],
    ) -> None:
        try:
            await mutation(snapshot.id, label_ids)
        except GitHubError as e:
            logger.error(f"Mutation on pull request #{snapshot.number} failed: {e}")
            raise MutationError(
                f"Failed to update pull request #{snapshot.number}: {e.message}", cause=e
            ) from e

    def _transition(self, state: GateState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state
