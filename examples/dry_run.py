#!/usr/bin/env python3
"""
Dry-run the gate against an event payload without touching GitHub.

Uses the in-memory MockGitHubClient so the labels and draft decision can be
inspected locally.
Run with: python examples/dry_run.py path/to/event.json
"""

import asyncio
import sys

from prgate import GateController, RuleSet, load_event, snapshot_from_event
from prgate.testing import MockGitHubClient, create_event_payload


async def main() -> int:
    if len(sys.argv) > 1:
        payload = load_event(sys.argv[1])
    else:
        payload = create_event_payload(title="fix typo", body="")

    snapshot = snapshot_from_event(payload)
    rule_set = RuleSet.from_strings(
        title_regex=r"^(feat|fix|chore|docs)(\([a-z0-9_-]+\))?: .+",
        description_regex=r"\S",
        title_min_length=10,
        description_min_length=20,
    )

    client = MockGitHubClient()
    for label in snapshot.labels:
        client.labels.add(label.name, label_id=label.id)

    result = await GateController(client, rule_set).run(snapshot)

    print(f"=== #{snapshot.number} {snapshot.title!r} ===")
    print(f"Outcome: {result.outcome.value}")
    for violation in result.violations:
        print(f"  - {violation.rule.display_name}: {violation.message}")

    names = {label.id: label.name for label in client.labels.repository_labels}
    print(f"Labels after run: {[names.get(i, i) for i in result.applied_label_ids]}")
    print(f"Converted to draft: {result.converted_to_draft}")
    return 0 if result.passed else 1


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
