"""prgate exception classes."""



class PRGateError(Exception):
    """Base exception for all prgate errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(PRGateError):
    """Raised when action inputs are invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class InvalidEventError(PRGateError):
    """Raised when the event payload cannot be mapped to a pull request."""

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_EVENT", message)


class GitHubError(PRGateError):
    """Base exception for errors returned by the GitHub API."""

    pass


class AuthenticationError(GitHubError):
    """Raised when the token is rejected."""

    pass


class AuthorizationError(GitHubError):
    """Raised when the token lacks a required permission."""

    pass


class NotFoundError(GitHubError):
    """Raised when a resource is not found."""

    pass


class ValidationError(GitHubError):
    """Raised on validation errors."""

    pass


class AlreadyExistsError(ValidationError):
    """Raised when creating a resource that already exists (e.g. a label)."""

    pass


class RateLimitedError(GitHubError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ServerError(GitHubError):
    """Raised on server errors (5xx), connection failures and unreadable responses."""

    pass


class GraphQLError(GitHubError):
    """Raised when a GraphQL response carries an ``errors`` array."""

    def __init__(
        self,
        code: str,
        message: str,
        errors: list[dict] | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.errors = errors or []


class MutationError(PRGateError):
    """Raised when the final label/draft mutation on the pull request fails."""

    def __init__(self, message: str, cause: GitHubError | None = None) -> None:
        super().__init__(
            "MUTATION_FAILED",
            message,
            cause.request_id if cause is not None else None,
        )
        self.cause = cause
