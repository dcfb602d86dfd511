"""prgate - pull request compliance gate for GitHub Actions."""

from prgate.client import AsyncGitHubClient
from prgate.config import GateConfig
from prgate.event import load_event, snapshot_from_event
from prgate.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    GitHubError,
    GraphQLError,
    InvalidEventError,
    MutationError,
    NotFoundError,
    PRGateError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from prgate.gate import GateController, GateOutcome, GateResult, GateState
from prgate.logging import configure_logging, get_logger
from prgate.reconcile import LabelCatalog, LabelReconciler
from prgate.rules import RuleEvaluator, evaluate
from prgate.transport import AsyncHTTPTransport
from prgate.types import (
    MANAGED_LABEL_NAMES,
    Label,
    ManagedLabel,
    Mergeability,
    PullRequestSnapshot,
    Repository,
    RuleSet,
    Violation,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client
    "AsyncGitHubClient",
    "AsyncHTTPTransport",
    # Core
    "RuleEvaluator",
    "evaluate",
    "LabelCatalog",
    "LabelReconciler",
    "GateController",
    "GateOutcome",
    "GateResult",
    "GateState",
    # Configuration and event
    "GateConfig",
    "load_event",
    "snapshot_from_event",
    # Types
    "Label",
    "ManagedLabel",
    "MANAGED_LABEL_NAMES",
    "Mergeability",
    "PullRequestSnapshot",
    "Repository",
    "RuleSet",
    "Violation",
    # Exceptions
    "PRGateError",
    "ConfigurationError",
    "InvalidEventError",
    "GitHubError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
    "AlreadyExistsError",
    "RateLimitedError",
    "ServerError",
    "GraphQLError",
    "MutationError",
    # Logging
    "configure_logging",
    "get_logger",
]
