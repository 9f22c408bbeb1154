"""
Issue reporting and tracking endpoints.

Store failures are raised as community_issues.errors exceptions and turned
into JSON error responses by the handlers in error_handlers.py.
"""

from fastapi import APIRouter, Depends, Request, status

from community_issues.repositories import IssueRepository

from ..dependencies import get_issue_repository
from ..schemas import ErrorResponse, IssueEnvelope, IssueListEnvelope
from ..services import issue_service

router = APIRouter(prefix="/issues", tags=["issues"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Issue not found"}}
BAD_REQUEST_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid request body"}}


@router.get("", response_model=IssueListEnvelope, response_model_exclude_none=True)
async def list_issues(repo: IssueRepository = Depends(get_issue_repository)):
    """List every issue, most recently created first."""
    return IssueListEnvelope(issues=repo.list())


@router.get(
    "/{issue_id}",
    response_model=IssueEnvelope,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSE,
)
async def get_issue(issue_id: str, repo: IssueRepository = Depends(get_issue_repository)):
    """Get a single issue by ID."""
    return IssueEnvelope(issue=repo.get_by_id(issue_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=IssueEnvelope,
    response_model_exclude_none=True,
    responses=BAD_REQUEST_RESPONSE,
)
async def create_issue(request: Request, repo: IssueRepository = Depends(get_issue_repository)):
    """Report a new issue. It starts in the "open" status."""
    payload = issue_service.parse_json_object(await request.body())
    return IssueEnvelope(issue=issue_service.create_issue(repo, payload))


@router.patch(
    "/{issue_id}/status",
    response_model=IssueEnvelope,
    response_model_exclude_none=True,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def update_issue_status(
    issue_id: str,
    request: Request,
    repo: IssueRepository = Depends(get_issue_repository),
):
    """Move an issue to open, in-progress or resolved."""
    # Unknown id takes precedence over a bad body
    repo.get_by_id(issue_id)
    payload = issue_service.parse_json_object(await request.body())
    return IssueEnvelope(issue=issue_service.update_issue_status(repo, issue_id, payload))
