"""
Feed filtering.

Filtering is a pure projection of the cached list: nothing here mutates the
input, and the store's most-recent-first order is preserved.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ..constants import EMPTY_FEED_MESSAGE, NO_MATCHES_MESSAGE
from ..models import Issue, IssueStatus


@dataclass
class FeedFilters:
    """
    Feed filter inputs. All three combine with logical AND.

    category: exact match, or None for "All Categories"
    status: exact match, or None for "All Status"
    search: case-insensitive substring of title or description; "" disables it
    """
    category: str | None = None
    status: IssueStatus | None = None
    search: str = ""

    def matches(self, issue: Issue) -> bool:
        if self.category and issue.category != self.category:
            return False
        if self.status and issue.status != self.status:
            return False
        if self.search:
            term = self.search.lower()
            return term in issue.title.lower() or term in issue.description.lower()
        return True


def filter_issues(issues: Iterable[Issue], filters: FeedFilters) -> list[Issue]:
    return [issue for issue in issues if filters.matches(issue)]


@dataclass(frozen=True)
class FeedView:
    """What the feed shows for a given list and filter set."""
    issues: list[Issue]
    total: int

    @property
    def summary(self) -> str:
        return f"Showing {len(self.issues)} of {self.total} issues"

    @property
    def empty_message(self) -> str | None:
        if self.total == 0:
            return EMPTY_FEED_MESSAGE
        if not self.issues:
            return NO_MATCHES_MESSAGE
        return None


def build_feed_view(issues: list[Issue], filters: FeedFilters) -> FeedView:
    return FeedView(issues=filter_issues(issues, filters), total=len(issues))


__all__ = ["FeedFilters", "FeedView", "filter_issues", "build_feed_view"]
