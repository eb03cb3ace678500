"""
Repo activity main client.

Provides the primary interface for building activity reports.
"""

from collections.abc import Mapping
from typing import Any

from repo_activity.clients import SearchClient
from repo_activity.config import ReportOptions
from repo_activity.fetcher import ActivityFetcher
from repo_activity.logging import get_logger, truncate_token
from repo_activity.query import ActivityKind
from repo_activity.report import build_report
from repo_activity.transport import HTTPTransport
from repo_activity.types.activity import ActivityRecord, ActivityReport

logger = get_logger()


class RepoActivityClient:
    """
    Main client for building repository activity reports.

    Example:
        ```python
        from repo_activity import ReportOptions, RepoActivityClient

        options = ReportOptions(repos=("psf/requests",), days_old=7)
        with RepoActivityClient(options) as client:
            report = client.build_report()

        print(report.total_issues, report.total_pull_requests)
        ```
    """

    def __init__(
        self,
        options: ReportOptions,
        timeout: float | None = None,
        transport: HTTPTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            options: Report configuration (repos, days, endpoint, token)
            timeout: Request timeout in seconds (default: no timeout)
            transport: Preconfigured transport (mainly for tests)
        """
        self.options = options

        self._transport = transport or HTTPTransport(
            base_url=options.base_url,
            token=options.token,
            timeout=timeout,
        )
        if options.token:
            logger.debug("using API token %s", truncate_token(options.token))
        else:
            logger.debug("no API token configured, using anonymous access")

        self.search = SearchClient(self._transport)
        self.fetcher = ActivityFetcher(self.search, options)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> "RepoActivityClient":
        """
        Create a client from environment variables.

        See ``ReportOptions.from_env`` for the variables read.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(ReportOptions.from_env(environ), timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def fetch(self, kind: ActivityKind) -> list[ActivityRecord]:
        """Fetch all issues or pull requests for the configured repos."""
        return self.fetcher.fetch(kind)

    def build_report(self) -> ActivityReport:
        """
        Fetch issues, then pull requests, and group them by repository.

        Raises:
            FetchError: If either fetch fails; no partial report is returned
        """
        issues = self.fetch(ActivityKind.ISSUE)
        pull_requests = self.fetch(ActivityKind.PULL_REQUEST)

        report = build_report(issues, pull_requests)
        logger.info(
            "built report for %d repos: %d issues, %d pull requests",
            len(self.options.repos),
            report.total_issues,
            report.total_pull_requests,
        )
        return report

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "RepoActivityClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
