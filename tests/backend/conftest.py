from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from backend.app.main import create_app
from community_issues.repositories import IssueRepository


@pytest.fixture
def test_app_client(repository) -> Iterator[tuple[TestClient, IssueRepository]]:
    """App wired to the per-test repository."""
    app = create_app(repository=repository)

    with TestClient(app) as client:
        yield client, repository


@pytest.fixture
def client(test_app_client) -> TestClient:
    return test_app_client[0]
