"""
Pytest plugin for repo activity testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["repo_activity.testing.conftest"]
"""

from repo_activity.testing.fixtures import (
    mock_search,
    sample_options,
    sample_record,
    sample_search_item,
)

__all__ = [
    "mock_search",
    "sample_options",
    "sample_record",
    "sample_search_item",
]
