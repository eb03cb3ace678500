"""Search API data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class SearchPage:
    """One page of issue search results."""

    items: list[dict[str, Any]]
    total_count: int
    incomplete_results: bool
    next_page: int | None  # None on the last page
