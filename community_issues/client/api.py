"""
HTTP data layer for the issue API.

Thin wrappers over httpx: each call returns typed Issue records on success and
raises IssueApiError on any non-success response or unreadable body. There
is no retry and no caching; the transport's default timeout applies.

Example:
    with IssueApiClient("http://localhost:4000") as api:
        for issue in api.fetch_issues():
            print(issue.title)
"""

from collections.abc import Mapping
from typing import Any

import httpx

from ..config import get_settings
from ..constants import DEFAULT_ERROR_MESSAGES
from ..logging import get_logger
from ..models import Issue, IssueStatus

logger = get_logger("client.api")

ISSUES_RESOURCE = "/issues"


class IssueApiError(Exception):
    """Raised when the API answers with a non-success status or a body that is not a JSON object."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class IssueApiClient:
    """
    Client for the issue REST API.

    Pass `http_client` to reuse an existing httpx.Client (for example a
    FastAPI TestClient); otherwise one is created for `base_url` and closed
    with this object. `api_prefix` must match the prefix the server mounts its
    router under (API_PREFIX, "/api" by default).
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        api_prefix: str | None = None,
    ):
        settings = get_settings()
        if api_prefix is None:
            api_prefix = settings.api_prefix
        self.issues_path = api_prefix.rstrip("/") + ISSUES_RESOURCE
        if http_client is None:
            if base_url is None:
                base_url = settings.api_base_url
            http_client = httpx.Client(base_url=base_url)
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = http_client

    def __enter__(self) -> "IssueApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch_issues(self) -> list[Issue]:
        """Fetch every issue, most recent first."""
        response = self._client.get(self.issues_path)
        data = self._json_or_raise(response, "fetch_issues")
        return [Issue.model_validate(item) for item in data.get("issues") or []]

    def fetch_issue(self, issue_id: str) -> Issue:
        response = self._client.get(f"{self.issues_path}/{issue_id}")
        data = self._json_or_raise(response, "fetch_issue")
        return Issue.model_validate(data["issue"])

    def create_issue(self, payload: Mapping[str, Any]) -> Issue:
        """Submit a new issue; `payload` holds title, description, category, location, contact."""
        response = self._client.post(self.issues_path, json=dict(payload))
        data = self._json_or_raise(response, "create_issue")
        return Issue.model_validate(data["issue"])

    def update_issue_status(self, issue_id: str, status: IssueStatus | str) -> Issue:
        value = status.value if isinstance(status, IssueStatus) else status
        response = self._client.patch(f"{self.issues_path}/{issue_id}/status", json={"status": value})
        data = self._json_or_raise(response, "update_status")
        return Issue.model_validate(data["issue"])

    def _json_or_raise(self, response: httpx.Response, operation: str) -> dict:
        if not response.is_success:
            message = response.text or DEFAULT_ERROR_MESSAGES[operation]
            logger.warning(
                "api_request_failed",
                operation=operation,
                status_code=response.status_code,
            )
            raise IssueApiError(message, status_code=response.status_code)
        try:
            data = response.json()
        except ValueError:
            logger.warning("api_response_not_json", operation=operation, status_code=response.status_code)
            raise IssueApiError(DEFAULT_ERROR_MESSAGES[operation], status_code=response.status_code) from None
        if not isinstance(data, dict):
            raise IssueApiError(DEFAULT_ERROR_MESSAGES[operation], status_code=response.status_code)
        return data


__all__ = ["IssueApiClient", "IssueApiError", "ISSUES_RESOURCE"]
