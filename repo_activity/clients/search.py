"""Search resource client."""

from typing import TYPE_CHECKING

from repo_activity.types.search import SearchPage

if TYPE_CHECKING:
    from repo_activity.transport import HTTPTransport

# Search endpoints cap page size at 100; larger values are clamped by the API
DEFAULT_PER_PAGE = 200


class SearchClient:
    """Client for the issue search endpoint (covers pull requests too)."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the search client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def issues(
        self,
        query: str,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> SearchPage:
        """
        Search issues and pull requests.

        Args:
            query: Search query, e.g. "is:issue repo:a/b created:>=2024-01-01"
            page: Page number, starting at 1
            per_page: Results per page

        Returns:
            SearchPage with raw result items and the next page number

        Raises:
            RepoActivityError: On API or connection errors
        """
        params: dict[str, str | int] = {
            "q": query,
            "page": page,
            "per_page": per_page,
        }

        data, response = self.transport.get("/search/issues", params=params)

        return SearchPage(
            items=list(data.get("items", [])),
            total_count=data.get("total_count", 0),
            incomplete_results=data.get("incomplete_results", False),
            next_page=self.transport.next_page(response),
        )
