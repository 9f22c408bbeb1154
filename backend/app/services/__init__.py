"""Service layer between routers and the issue repository."""

from . import issue_service

__all__ = ["issue_service"]
