"""In-memory issue repository: the authoritative store of Issue records."""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from ..errors import NotFoundError
from ..logging import get_logger
from ..models import Issue, IssueStatus, parse_status
from ..utils import new_issue_id, utc_now
from ..validation import ensure_required_fields, normalize_issue_fields

logger = get_logger("repository.issues")

ISSUE_NOT_FOUND_MESSAGE = "Issue not found"


class IssueRepository:
    """
    Volatile issue store, ordered most-recent-first.

    Records are only ever inserted or have their status changed; there is no
    edit or delete. Callers receive copies, so the list held here is the only
    canonical state.

    Usage:
        repo = IssueRepository()
        issue = repo.create({"title": "...", "description": "...", ...})
        repo.update_status(issue.id, "resolved")
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_issue_id,
    ):
        self._clock = clock
        self._id_factory = id_factory
        self._issues: list[Issue] = []

    def __len__(self) -> int:
        return len(self._issues)

    def create(self, fields: Mapping[str, Any]) -> Issue:
        """
        Create a new open issue and insert it at the front of the store.

        Args:
            fields: Raw title, description, category, location and optional contact.

        Returns:
            A copy of the stored issue.

        Raises:
            ValidationError: If any required field is missing or empty.
        """
        ensure_required_fields(fields)

        now = self._clock()
        issue = Issue(
            id=self._id_factory(),
            status=IssueStatus.OPEN,
            created_at=now,
            updated_at=now,
            **normalize_issue_fields(fields),
        )
        self._issues.insert(0, issue)

        logger.info("issue_created", issue_id=issue.id, category=issue.category)
        return issue.model_copy()

    def list(self) -> list[Issue]:
        """All issues, most recently created first."""
        return [issue.model_copy() for issue in self._issues]

    def get_by_id(self, issue_id: str) -> Issue:
        """Get a single issue by ID or raise NotFoundError."""
        return self._find(issue_id).model_copy()

    def update_status(self, issue_id: str, status: Any) -> Issue:
        """
        Move an issue to a new status and refresh updated_at.

        The id is checked before the status value. Setting the status an issue
        already has changes nothing, updated_at included.

        Raises:
            NotFoundError: If no issue has this id.
            ValidationError: If status is not open, in-progress or resolved.
        """
        issue = self._find(issue_id)
        new_status = parse_status(status)

        if issue.status == new_status:
            logger.info("issue_status_unchanged", issue_id=issue_id, status=new_status.value)
            return issue.model_copy()

        previous = issue.status
        issue.status = new_status
        # Never earlier than the previous stamp, even if the wall clock steps back
        issue.updated_at = max(self._clock(), issue.updated_at)

        logger.info(
            "issue_status_updated",
            issue_id=issue_id,
            from_status=previous.value,
            to_status=new_status.value,
        )
        return issue.model_copy()

    def _find(self, issue_id: str) -> Issue:
        for issue in self._issues:
            if issue.id == issue_id:
                return issue
        raise NotFoundError(ISSUE_NOT_FOUND_MESSAGE)
