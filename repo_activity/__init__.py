"""github-repo-activity - issue and pull request activity reports for GitHub repositories."""

__version__ = "0.1.0"

from repo_activity.client import RepoActivityClient
from repo_activity.config import ReportOptions
from repo_activity.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    FetchError,
    NotFoundError,
    RateLimitedError,
    RepoActivityError,
    ServerError,
    ValidationError,
)
from repo_activity.logging import configure_logging, get_logger
from repo_activity.query import ActivityKind, build_query
from repo_activity.report import build_report
from repo_activity.transport import HTTPTransport
from repo_activity.types import ActivityAuthor, ActivityRecord, ActivityReport, RepoActivity

__all__ = [
    "__version__",
    # Main Client
    "RepoActivityClient",
    "ReportOptions",
    # Core
    "ActivityKind",
    "build_query",
    "build_report",
    # Types
    "ActivityAuthor",
    "ActivityRecord",
    "RepoActivity",
    "ActivityReport",
    # Exceptions
    "RepoActivityError",
    "ConfigurationError",
    "FetchError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
