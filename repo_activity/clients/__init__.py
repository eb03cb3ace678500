"""Repo activity resource clients."""

from repo_activity.clients.search import SearchClient

__all__ = [
    "SearchClient",
]
