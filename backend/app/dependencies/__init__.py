"""
FastAPI dependencies.

The issue repository is built once per app in create_app() and stored on
app.state; handlers receive it through get_issue_repository.
"""

from fastapi import Request

from community_issues.repositories import IssueRepository


def get_issue_repository(request: Request) -> IssueRepository:
    return request.app.state.issue_repository


__all__ = ["get_issue_repository"]
