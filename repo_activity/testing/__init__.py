"""Repo activity testing utilities.

Provides a mock search client and sample data factories for testing code
that builds activity reports.
"""

from repo_activity.testing.fixtures import create_mock_record, create_search_item
from repo_activity.testing.mock import MockCall, MockSearchClient

__all__ = [
    # Mock client
    "MockSearchClient",
    "MockCall",
    # Helper functions
    "create_search_item",
    "create_mock_record",
]
