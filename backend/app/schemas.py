"""
Pydantic schemas for API responses.

Request bodies are read as raw JSON by the handlers so that missing fields
produce the API's own 400 message instead of a 422 validation report.
"""

from pydantic import BaseModel

from community_issues.models import Issue


class IssueEnvelope(BaseModel):
    issue: Issue


class IssueListEnvelope(BaseModel):
    issues: list[Issue]


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
