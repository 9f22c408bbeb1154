"""Tests for the Issue model and status helpers."""

from datetime import datetime, timezone

import pytest

from community_issues.errors import ValidationError
from community_issues.models import (
    STATUS_VALUES,
    Issue,
    IssueStatus,
    available_transitions,
    parse_status,
)


def test_status_values():
    assert STATUS_VALUES == ("open", "in-progress", "resolved")


def test_parse_status():
    assert parse_status("in-progress") is IssueStatus.IN_PROGRESS
    with pytest.raises(ValidationError, match="open\\|in-progress\\|resolved"):
        parse_status("closed")


@pytest.mark.parametrize("status", list(IssueStatus))
def test_available_transitions_exclude_current(status):
    transitions = available_transitions(status)
    assert status not in transitions
    assert len(transitions) == 2


def test_json_shape_uses_camel_case(make_issue):
    data = make_issue(contact="555-0100").to_json_dict()

    assert set(data) == {
        "id",
        "title",
        "description",
        "category",
        "location",
        "contact",
        "status",
        "createdAt",
        "updatedAt",
    }
    assert data["status"] == "open"


def test_json_shape_omits_missing_contact(make_issue):
    assert "contact" not in make_issue().to_json_dict()


def test_timestamps_serialize_as_iso_8601(make_issue):
    created = datetime(2026, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    data = make_issue(created_at=created, updated_at=created).to_json_dict()

    assert data["createdAt"].startswith("2026-03-04T05:06:07")


def test_parses_api_payload():
    issue = Issue.model_validate(
        {
            "id": "a1",
            "title": "Pothole",
            "description": "Deep one",
            "category": "Safety",
            "location": "5th Ave",
            "status": "resolved",
            "createdAt": "2026-01-01T00:00:00Z",
            "updatedAt": "2026-01-02T00:00:00Z",
        }
    )

    assert issue.status is IssueStatus.RESOLVED
    assert issue.updated_at > issue.created_at
    assert issue.contact is None
