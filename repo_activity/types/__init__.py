"""Repo activity type definitions.

This module exports all data model types used by the package.
"""

from repo_activity.types.activity import (
    ActivityAuthor,
    ActivityRecord,
    ActivityReport,
    RepoActivity,
)
from repo_activity.types.search import SearchPage

__all__ = [
    # Activity types
    "ActivityAuthor",
    "ActivityRecord",
    "RepoActivity",
    "ActivityReport",
    # Search types
    "SearchPage",
]
