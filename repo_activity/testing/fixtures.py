"""
Pytest fixtures for repo activity testing.

Provides sample data factories and fixtures for tests that build reports
without network access.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Generator

import pytest

from repo_activity.config import ReportOptions
from repo_activity.testing.mock import MockSearchClient
from repo_activity.types.activity import ActivityAuthor, ActivityRecord

API_URL = "https://api.github.com"


# ============================================================================
# Helper Functions
# ============================================================================


def create_search_item(
    number: int = 1,
    repo: str = "octo/widgets",
    state: str = "open",
    title: str | None = "Sample issue",
    login: str = "octocat",
    created_at: datetime | None = None,
    api_url: str = API_URL,
    **overrides: Any,
) -> dict[str, Any]:
    """
    Create a raw search result item as returned by ``GET /search/issues``.

    Args:
        number: Issue or pull request number
        repo: Repository in "owner/name" form
        state: "open" or "closed"
        title: Item title
        login: Author login
        created_at: Creation time (default: three days ago)
        api_url: API base URL used for ``repository_url``
        **overrides: Extra or replacement fields

    Returns:
        Raw item dictionary
    """
    if created_at is None:
        created_at = datetime.now(timezone.utc) - timedelta(days=3, hours=1)

    item: dict[str, Any] = {
        "id": 1000 + number,
        "number": number,
        "title": title,
        "state": state,
        "user": {
            "login": login,
            "html_url": f"https://github.com/{login}",
        },
        "repository_url": f"{api_url}/repos/{repo}",
        "html_url": f"https://github.com/{repo}/issues/{number}",
        "created_at": created_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
    }
    item.update(overrides)
    return item


def create_mock_record(
    number: int = 1,
    repo: str = "octo/widgets",
    status: str | None = "open",
    title: str | None = "Sample issue",
    author: str | None = "octocat",
    age: str = "3 days",
) -> ActivityRecord:
    """Create an ActivityRecord with sensible defaults."""
    return ActivityRecord(
        id=1000 + number,
        number=number,
        title=title,
        author=ActivityAuthor(
            display_name=author,
            profile_url=f"https://github.com/{author}" if author else None,
        ),
        repo=repo,
        url=f"https://github.com/{repo}/issues/{number}",
        status=status,
        age=age,
    )


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_search() -> Generator[MockSearchClient, None, None]:
    """
    Provide a MockSearchClient for testing.

    Example:
        ```python
        def test_fetch(mock_search, sample_options):
            mock_search.configure_pages("issue", [[create_search_item()]])
            records = ActivityFetcher(mock_search, sample_options).fetch(ActivityKind.ISSUE)
        ```
    """
    search = MockSearchClient()
    yield search
    search.reset()


@pytest.fixture
def sample_options() -> ReportOptions:
    """Provide options for two repositories over the default window."""
    return ReportOptions(repos=("octo/widgets", "octo/gadgets"), days_old=14)


@pytest.fixture
def sample_record() -> ActivityRecord:
    """Provide a sample ActivityRecord."""
    return create_mock_record()


@pytest.fixture
def sample_search_item() -> dict[str, Any]:
    """Provide a sample raw search result item."""
    return create_search_item()
