"""
Repository implementations for issue storage.

Usage:
    from community_issues.repositories import IssueRepository

    repo = IssueRepository()
    issues = repo.list()
"""

from .issue_repository import ISSUE_NOT_FOUND_MESSAGE, IssueRepository

__all__ = ["IssueRepository", "ISSUE_NOT_FOUND_MESSAGE"]
