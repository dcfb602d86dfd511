"""
Action configuration.

Reads the action inputs the GitHub Actions runner exposes as ``INPUT_*``
environment variables, plus the runner's ``GITHUB_*`` variables.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from prgate.exceptions import ConfigurationError
from prgate.types.rules import RuleSet

DEFAULT_API_URL = "https://api.github.com"

KEY_REPO_TOKEN = "repo-token"
KEY_TITLE_REGEX = "titleRegex"
KEY_DESCRIPTION_REGEX = "descriptionRegex"
KEY_TITLE_MIN_LENGTH = "titleMinLength"
KEY_DESCRIPTION_MIN_LENGTH = "descriptionMinLength"


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(environ: Mapping[str, str], name: str, default: str = "") -> str:
    """Read an action input, stripped of surrounding whitespace."""
    return environ.get(input_env_name(name), default).strip()


@dataclass(frozen=True)
class GateConfig:
    """Everything a run needs besides the event payload."""

    token: str
    rule_set: RuleSet
    event_path: str
    api_url: str = DEFAULT_API_URL
    graphql_url: str | None = None
    output_path: str | None = None
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GateConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            INPUT_REPO-TOKEN: GitHub token (falls back to GITHUB_TOKEN)
            INPUT_TITLEREGEX: Title pattern (optional, default matches anything)
            INPUT_DESCRIPTIONREGEX: Description pattern (optional)
            INPUT_TITLEMINLENGTH: Minimum title length (optional, default 0)
            INPUT_DESCRIPTIONMINLENGTH: Minimum description length (optional, default 0)
            GITHUB_EVENT_PATH: Path of the triggering event's JSON payload (required)
            GITHUB_API_URL / GITHUB_GRAPHQL_URL: API endpoints (optional)
            GITHUB_OUTPUT: File receiving step outputs (optional)
            RUNNER_DEBUG: "1" enables debug logging (optional)

        Raises:
            ConfigurationError: If a required variable is missing or an input is malformed
        """
        if environ is None:
            environ = os.environ

        token = get_input(environ, KEY_REPO_TOKEN) or environ.get("GITHUB_TOKEN", "").strip()
        if not token:
            raise ConfigurationError(
                f"Input required and not supplied: {KEY_REPO_TOKEN}"
            )

        event_path = environ.get("GITHUB_EVENT_PATH", "").strip()
        if not event_path:
            raise ConfigurationError("GITHUB_EVENT_PATH environment variable not set")

        rule_set = RuleSet.from_strings(
            title_regex=get_input(environ, KEY_TITLE_REGEX),
            description_regex=get_input(environ, KEY_DESCRIPTION_REGEX),
            title_min_length=_parse_length(environ, KEY_TITLE_MIN_LENGTH),
            description_min_length=_parse_length(environ, KEY_DESCRIPTION_MIN_LENGTH),
        )

        return cls(
            token=token,
            rule_set=rule_set,
            event_path=event_path,
            api_url=environ.get("GITHUB_API_URL") or DEFAULT_API_URL,
            graphql_url=environ.get("GITHUB_GRAPHQL_URL") or None,
            output_path=environ.get("GITHUB_OUTPUT") or None,
            debug=environ.get("RUNNER_DEBUG") == "1",
        )


def _parse_length(environ: Mapping[str, str], name: str) -> int:
    raw = get_input(environ, name)
    if not raw:
        return 0
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid {name}: {raw!r} is not an integer") from None
    if value < 0:
        raise ConfigurationError(f"Invalid {name}: {value} is negative")
    return value
