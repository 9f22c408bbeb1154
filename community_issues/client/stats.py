"""Aggregate counts over the cached issue list."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from ..models import Issue, IssueStatus


@dataclass(frozen=True)
class IssueStats:
    total: int = 0
    open: int = 0
    in_progress: int = 0
    resolved: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "open": self.open,
            "in_progress": self.in_progress,
            "resolved": self.resolved,
        }


def compute_stats(issues: Iterable[Issue]) -> IssueStats:
    """Count issues in total and per status."""
    counts = Counter(issue.status for issue in issues)
    return IssueStats(
        total=sum(counts.values()),
        open=counts[IssueStatus.OPEN],
        in_progress=counts[IssueStatus.IN_PROGRESS],
        resolved=counts[IssueStatus.RESOLVED],
    )


__all__ = ["IssueStats", "compute_stats"]
