"""
Issue service - bridges FastAPI endpoints with the issue repository.

Handlers hand over the parsed JSON body; this module runs the required-field
presence check before anything reaches the store and serializes records for
the response.
"""

import json
from typing import Any

from community_issues.errors import ValidationError
from community_issues.logging import get_logger, log_context
from community_issues.models import Issue
from community_issues.repositories import IssueRepository
from community_issues.validation import ensure_required_fields

logger = get_logger("api.issue_service")

INVALID_JSON_MESSAGE = "Invalid JSON body"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json_object(body: bytes) -> dict[str, Any]:
    """
    Decode a request body into a dict.

    An empty body or a JSON value that is not an object yields an empty dict.
    Anything json.loads rejects raises ValidationError, and so do the
    non-standard NaN and Infinity literals.
    """
    if not body:
        return {}
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError, RecursionError):
        raise ValidationError(INVALID_JSON_MESSAGE) from None
    return data if isinstance(data, dict) else {}


def create_issue(repo: IssueRepository, payload: dict[str, Any]) -> Issue:
    """Validate presence of required fields, then create the issue."""
    try:
        ensure_required_fields(payload)
    except ValidationError as e:
        logger.info("issue_rejected", missing_fields=e.fields)
        raise
    return repo.create(payload)


def update_issue_status(repo: IssueRepository, issue_id: str, payload: dict[str, Any]) -> Issue:
    with log_context(issue_id=issue_id, operation="status_update"):
        return repo.update_status(issue_id, payload.get("status"))
