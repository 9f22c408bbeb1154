"""
Data models.

Usage:
    from community_issues.models import Issue, IssueStatus
"""

from .issue import (
    INVALID_STATUS_MESSAGE,
    STATUS_VALUES,
    Issue,
    IssueStatus,
    available_transitions,
    parse_status,
)

__all__ = [
    "Issue",
    "IssueStatus",
    "STATUS_VALUES",
    "INVALID_STATUS_MESSAGE",
    "available_transitions",
    "parse_status",
]
