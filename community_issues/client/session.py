"""
Client-side issue session.

Holds the disposable cached copy of the store's list and keeps it in step
with mutations: a created issue is prepended, an updated one replaced in
place. A refresh always replaces the cache with the server's list.
"""

import httpx

from ..constants import DEFAULT_ERROR_MESSAGES
from ..logging import get_logger
from ..models import Issue, IssueStatus
from .api import IssueApiClient, IssueApiError
from .feed import FeedFilters, FeedView, build_feed_view
from .stats import IssueStats, compute_stats

logger = get_logger("client.session")


class IssueSession:
    """
    Cached issue list plus loading/error state.

    Calls go through a synchronous client, so status changes made from one
    session complete in the order they were issued.
    """

    def __init__(self, api: IssueApiClient):
        self.api = api
        self.issues: list[Issue] = []
        self.loading = False
        self.error: str | None = None

    def refresh(self) -> bool:
        """
        Reload the list from the server.

        Failures are recorded in `error` instead of raised, so the feed can
        display them inline. Returns True on success.
        """
        self.loading = True
        try:
            self.issues = self.api.fetch_issues()
            self.error = None
            return True
        except IssueApiError as e:
            self.error = e.message
        except httpx.HTTPError as e:
            logger.warning("refresh_failed", error=str(e), error_type=type(e).__name__)
            self.error = DEFAULT_ERROR_MESSAGES["fetch_issues"]
        finally:
            self.loading = False
        return False

    def add_issue(self, payload: dict) -> Issue:
        """Create an issue and put it at the top of the cached list."""
        created = self.api.create_issue(payload)
        self.issues = [created, *self.issues]
        return created

    def change_status(self, issue_id: str, status: IssueStatus | str) -> Issue:
        updated = self.api.update_issue_status(issue_id, status)
        self.issues = [updated if issue.id == issue_id else issue for issue in self.issues]
        return updated

    @property
    def stats(self) -> IssueStats:
        return compute_stats(self.issues)

    def view(self, filters: FeedFilters | None = None) -> FeedView:
        return build_feed_view(self.issues, filters or FeedFilters())


__all__ = ["IssueSession"]
