"""Tests for the HTTP data layer."""

import json

import httpx
import pytest

from community_issues.client import IssueApiClient, IssueApiError
from community_issues.models import IssueStatus


def _mock_client(handler) -> IssueApiClient:
    return IssueApiClient(
        http_client=httpx.Client(base_url="http://issues.test", transport=httpx.MockTransport(handler))
    )


class TestAgainstApp:
    def test_create_and_fetch(self, api, issue_payload):
        created = api.create_issue(issue_payload)

        assert created.status is IssueStatus.OPEN
        assert api.fetch_issues() == [created]
        assert api.fetch_issue(created.id) == created

    def test_update_status(self, api, issue_payload):
        created = api.create_issue(issue_payload)

        updated = api.update_issue_status(created.id, IssueStatus.RESOLVED)

        assert updated.status is IssueStatus.RESOLVED
        assert updated.updated_at > created.updated_at

    def test_create_error_carries_body_text(self, api):
        with pytest.raises(IssueApiError) as exc_info:
            api.create_issue({"title": "Only title"})

        assert exc_info.value.status_code == 400
        assert "Missing fields: description,category,location" in exc_info.value.message

    def test_update_unknown_issue(self, api):
        with pytest.raises(IssueApiError) as exc_info:
            api.update_issue_status("missing", "resolved")

        assert exc_info.value.status_code == 404
        assert "Issue not found" in str(exc_info.value)

    def test_does_not_close_borrowed_client(self, api):
        api.close()
        assert api.fetch_issues() == []


class TestDefaultMessages:
    @pytest.mark.parametrize(
        "call,expected",
        [
            (lambda c: c.fetch_issues(), "Failed to load issues"),
            (lambda c: c.fetch_issue("x"), "Failed to load issue"),
            (lambda c: c.create_issue({}), "Failed to submit issue"),
            (lambda c: c.update_issue_status("x", "open"), "Failed to update status"),
        ],
    )
    def test_empty_error_body_uses_default(self, call, expected):
        client = _mock_client(lambda request: httpx.Response(503))

        with pytest.raises(IssueApiError) as exc_info:
            call(client)

        assert exc_info.value.message == expected
        assert exc_info.value.status_code == 503

    def test_error_body_text_is_kept_verbatim(self):
        client = _mock_client(lambda request: httpx.Response(502, text="upstream down"))

        with pytest.raises(IssueApiError, match="upstream down"):
            client.fetch_issues()


def test_missing_issues_key_yields_empty_list():
    client = _mock_client(lambda request: httpx.Response(200, json={}))
    assert client.fetch_issues() == []


def test_status_is_sent_as_plain_value():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = request.content
        return httpx.Response(
            200,
            json={
                "issue": {
                    "id": "a",
                    "title": "t",
                    "description": "d",
                    "category": "c",
                    "location": "l",
                    "status": "in-progress",
                    "createdAt": "2026-01-01T00:00:00Z",
                    "updatedAt": "2026-01-01T00:01:00Z",
                }
            },
        )

    issue = _mock_client(handler).update_issue_status("a", IssueStatus.IN_PROGRESS)

    assert seen["path"] == "/api/issues/a/status"
    assert json.loads(seen["body"]) == {"status": "in-progress"}
    assert issue.status is IssueStatus.IN_PROGRESS


def test_owned_client_is_closed():
    client = IssueApiClient("http://issues.test")
    with client:
        pass
    assert client._client.is_closed


@pytest.mark.parametrize("body", ["<html>gateway</html>", "[1, 2]"])
def test_success_without_json_object_raises_api_error(body):
    client = _mock_client(lambda request: httpx.Response(200, text=body))

    with pytest.raises(IssueApiError) as exc_info:
        client.fetch_issues()

    assert exc_info.value.message == "Failed to load issues"
    assert exc_info.value.status_code == 200


def test_custom_api_prefix_matches_server():
    from fastapi.testclient import TestClient

    from backend.app.main import create_app
    from community_issues.config import Settings

    app = create_app(Settings(_env_file=None, api_prefix="/v2"))
    with TestClient(app) as http_client:
        api = IssueApiClient(http_client=http_client, api_prefix="/v2")
        created = api.create_issue(
            {"title": "t", "description": "d", "category": "Safety", "location": "l"}
        )

        assert api.issues_path == "/v2/issues"
        assert api.fetch_issue(created.id) == created
        assert http_client.get("/api/issues").status_code == 404


def test_api_prefix_defaults_to_settings(monkeypatch):
    from community_issues.config import get_settings

    monkeypatch.setenv("API_PREFIX", "/v3/")
    get_settings.cache_clear()
    try:
        client = _mock_client(lambda request: httpx.Response(200, json={"issues": []}))
    finally:
        get_settings.cache_clear()

    assert client.issues_path == "/v3/issues"
