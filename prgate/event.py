"""
Pull request event parsing.

Validates the triggering event's JSON payload once and maps it into a
PullRequestSnapshot. Nothing past this module looks at the raw payload.
"""

import json
from pathlib import Path
from typing import Any

from prgate.exceptions import InvalidEventError
from prgate.logging import get_logger
from prgate.types.labels import Label
from prgate.types.pulls import Mergeability, PullRequestSnapshot, Repository

logger = get_logger("event")


def load_event(path: str | Path) -> dict[str, Any]:
    """
    Read the event payload file written by the Actions runner.

    Raises:
        InvalidEventError: If the file is missing or not a JSON object
    """
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidEventError(f"Cannot read event payload {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidEventError(f"Event payload {path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidEventError(f"Event payload {path} is not a JSON object")
    return payload


def snapshot_from_event(payload: dict[str, Any]) -> PullRequestSnapshot:
    """
    Map a ``pull_request`` / ``pull_request_target`` event payload to a snapshot.

    Raises:
        InvalidEventError: If the payload has no pull request or a field is missing or mistyped
    """
    pull_request = payload.get("pull_request")
    if not isinstance(pull_request, dict):
        raise InvalidEventError("Event payload has no pull_request object")

    repository = _parse_repository(payload.get("repository"))

    body = pull_request.get("body")
    if body is not None and not isinstance(body, str):
        raise InvalidEventError("pull_request.body must be a string or null")

    mergeable = pull_request.get("mergeable")
    if mergeable is not None and not isinstance(mergeable, bool):
        raise InvalidEventError("pull_request.mergeable must be a boolean or null")

    snapshot = PullRequestSnapshot(
        id=_require(pull_request, "node_id", str, "pull_request"),
        number=_require(pull_request, "number", int, "pull_request"),
        title=_require(pull_request, "title", str, "pull_request"),
        description=body,
        mergeable=Mergeability.from_payload(mergeable),
        repository=repository,
        is_draft=bool(pull_request.get("draft", False)),
        labels=tuple(_parse_label(raw) for raw in pull_request.get("labels") or []),
    )

    logger.debug(
        f"Parsed pull request #{snapshot.number} in {repository.full_name} "
        f"({len(snapshot.labels)} labels, mergeable={snapshot.mergeable.value})"
    )
    return snapshot


def _parse_repository(data: Any) -> Repository:
    if not isinstance(data, dict):
        raise InvalidEventError("Event payload has no repository object")

    owner = data.get("owner")
    if not isinstance(owner, dict):
        raise InvalidEventError("repository.owner must be an object")

    return Repository(
        owner=_require(owner, "login", str, "repository.owner"),
        name=_require(data, "name", str, "repository"),
    )


def _parse_label(data: Any) -> Label:
    if not isinstance(data, dict):
        raise InvalidEventError("pull_request.labels entries must be objects")
    return Label(
        id=_require(data, "node_id", str, "pull_request.labels[]"),
        name=_require(data, "name", str, "pull_request.labels[]"),
    )


def _require(data: dict[str, Any], key: str, expected: type, where: str) -> Any:
    value = data.get(key)
    # bool is an int subclass; reject it where a number is expected
    if value is None or not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise InvalidEventError(f"{where}.{key} must be a {expected.__name__}")
    return value
