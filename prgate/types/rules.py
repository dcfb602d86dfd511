"""Rule configuration and evaluation results."""

import re
from dataclasses import dataclass
from re import Pattern

from prgate.exceptions import ConfigurationError
from prgate.types.labels import ManagedLabel


@dataclass(frozen=True)
class RuleSet:
    """Immutable rule configuration for one run."""

    title_pattern: Pattern[str]
    description_pattern: Pattern[str]
    title_min_length: int = 0
    description_min_length: int = 0

    def __post_init__(self) -> None:
        if self.title_min_length < 0:
            raise ConfigurationError(
                f"titleMinLength must be non-negative, got {self.title_min_length}"
            )
        if self.description_min_length < 0:
            raise ConfigurationError(
                f"descriptionMinLength must be non-negative, got {self.description_min_length}"
            )

    @classmethod
    def from_strings(
        cls,
        title_regex: str = "",
        description_regex: str = "",
        title_min_length: int = 0,
        description_min_length: int = 0,
    ) -> "RuleSet":
        """
        Build a RuleSet from raw pattern strings.

        Raises:
            ConfigurationError: If a pattern does not compile or a length is negative
        """
        return cls(
            title_pattern=_compile("titleRegex", title_regex),
            description_pattern=_compile("descriptionRegex", description_regex),
            title_min_length=title_min_length,
            description_min_length=description_min_length,
        )


def _compile(input_name: str, pattern: str) -> Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"Invalid {input_name} {pattern!r}: {e}") from e


@dataclass(frozen=True)
class Violation:
    """A failed rule together with its human-readable message."""

    rule: ManagedLabel
    message: str
