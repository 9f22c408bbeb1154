"""
Client side of the issue reporter.

Usage:
    from community_issues.client import IssueApiClient, IssueSession, FeedFilters

    with IssueApiClient("http://localhost:4000") as api:
        session = IssueSession(api)
        session.refresh()
        view = session.view(FeedFilters(category="Safety", search="pot"))
"""

from .api import IssueApiClient, IssueApiError
from .feed import FeedFilters, FeedView, build_feed_view, filter_issues
from .form import Coordinates, IssueFormState
from .session import IssueSession
from .stats import IssueStats, compute_stats

__all__ = [
    "IssueApiClient",
    "IssueApiError",
    "FeedFilters",
    "FeedView",
    "build_feed_view",
    "filter_issues",
    "Coordinates",
    "IssueFormState",
    "IssueSession",
    "IssueStats",
    "compute_stats",
]
