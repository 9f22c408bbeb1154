"""
Pytest fixtures for Community Issue Reporter tests.

Each test gets its own IssueRepository driven by a fake clock, so timestamps
are deterministic and strictly increasing.
"""

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from community_issues.models import Issue, IssueStatus  # noqa: E402
from community_issues.repositories import IssueRepository  # noqa: E402


class FakeClock:
    """Returns a fixed start time, then advances by `step` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repository(clock) -> IssueRepository:
    """Fresh, empty issue store."""
    return IssueRepository(clock=clock)


@pytest.fixture
def issue_payload() -> dict:
    return {
        "title": "Broken light",
        "description": "Streetlight out",
        "category": "Infrastructure",
        "location": "Main St",
    }


@pytest.fixture
def make_issue():
    """Build an Issue directly, without going through a store."""
    counter = {"n": 0}

    def _make_issue(**overrides) -> Issue:
        counter["n"] += 1
        created = datetime(2026, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=counter["n"])
        fields = {
            "id": f"issue-{counter['n']}",
            "title": f"Issue {counter['n']}",
            "description": "Something needs fixing",
            "category": "Other",
            "location": "Somewhere",
            "status": IssueStatus.OPEN,
            "created_at": created,
            "updated_at": created,
        }
        fields.update(overrides)
        return Issue(**fields)

    return _make_issue


@pytest.fixture
def api(repository):
    """IssueApiClient talking to an in-process app through TestClient."""
    from fastapi.testclient import TestClient

    from backend.app.main import create_app
    from community_issues.client import IssueApiClient

    with TestClient(create_app(repository=repository)) as http_client:
        yield IssueApiClient(http_client=http_client)
