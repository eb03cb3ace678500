"""Repo activity exception classes."""


class RepoActivityError(Exception):
    """Base exception for all repo activity errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(RepoActivityError):
    """Raised when report configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class AuthenticationError(RepoActivityError):
    """Raised when the API rejects the credential token."""

    pass


class AuthorizationError(RepoActivityError):
    """Raised when access is denied."""

    pass


class NotFoundError(RepoActivityError):
    """Raised when a resource is not found."""

    pass


class RateLimitedError(RepoActivityError):
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


class ValidationError(RepoActivityError):
    """Raised when the API rejects the search query."""

    pass


class ServerError(RepoActivityError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class FetchError(RepoActivityError):
    """
    Raised when a paginated fetch fails on any page.

    The original error is kept in ``cause`` (and chained as ``__cause__``).
    Records from pages that succeeded before the failure are discarded.
    """

    def __init__(self, kind: str, cause: BaseException) -> None:
        self.kind = kind
        self.cause = cause
        request_id = getattr(cause, "request_id", None)
        super().__init__(
            "FETCH_ERROR",
            f"failed to fetch {kind} activity: {cause}",
            request_id,
        )
