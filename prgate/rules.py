"""Rule evaluation.

The five rules are fixed and always all checked; the order of the returned
violations is the order of the failure message shown to the author.
"""

from prgate.types.labels import ManagedLabel
from prgate.types.pulls import Mergeability, PullRequestSnapshot
from prgate.types.rules import RuleSet, Violation

MESSAGE_TITLE_FORMAT = "Title doesn't match Regex!"
MESSAGE_DESCRIPTION_FORMAT = "Description doesn't match Regex!"
MESSAGE_TITLE_LENGTH = "Title isn't long enough!"
MESSAGE_DESCRIPTION_LENGTH = "Description isn't long enough!"
MESSAGE_MERGE_CONFLICT = "Pull request has merge conflicts!"


class RuleEvaluator:
    """Evaluates a pull request snapshot against a RuleSet."""

    def __init__(self, rule_set: RuleSet) -> None:
        self.rule_set = rule_set

    def evaluate(self, snapshot: PullRequestSnapshot) -> list[Violation]:
        """
        Check every rule and collect the failures.

        Never raises: a pattern that does not match yields a violation.

        Args:
            snapshot: Pull request state at evaluation time

        Returns:
            Violations in rule order (title format, description format,
            title length, description length, mergeability)
        """
        rules = self.rule_set
        title = snapshot.title
        description = snapshot.description
        violations: list[Violation] = []

        if rules.title_pattern.search(title) is None:
            violations.append(Violation(ManagedLabel.TITLE_FORMAT, MESSAGE_TITLE_FORMAT))

        if description is None or rules.description_pattern.search(description) is None:
            violations.append(Violation(ManagedLabel.DESCRIPTION_FORMAT, MESSAGE_DESCRIPTION_FORMAT))

        if len(title) < rules.title_min_length:
            violations.append(Violation(ManagedLabel.TITLE_LENGTH, MESSAGE_TITLE_LENGTH))

        if description is None or len(description) < rules.description_min_length:
            violations.append(Violation(ManagedLabel.DESCRIPTION_LENGTH, MESSAGE_DESCRIPTION_LENGTH))

        # UNKNOWN means GitHub has not finished computing it yet
        if snapshot.mergeable is Mergeability.CONFLICTING:
            violations.append(Violation(ManagedLabel.MERGE_CONFLICT, MESSAGE_MERGE_CONFLICT))

        return violations


def evaluate(snapshot: PullRequestSnapshot, rule_set: RuleSet) -> list[Violation]:
    """Evaluate ``snapshot`` against ``rule_set``."""
    return RuleEvaluator(rule_set).evaluate(snapshot)
