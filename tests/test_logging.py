"""Tests for the structlog setup and request context handling."""

import json

import structlog
from fastapi.testclient import TestClient

from backend.app.main import create_app
from community_issues.logging import APP_NAME, build_processors, log_context


def _render(processors, **event_dict):
    result = {"event": "something_happened", **event_dict}
    for processor in processors:
        result = processor(None, "info", result)
    return result


def test_json_renderer_outside_development():
    processors = build_processors(console=False)

    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert not any(isinstance(p, structlog.dev.ConsoleRenderer) for p in processors)


def test_console_renderer_in_development():
    processors = build_processors(console=True)

    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_json_lines_carry_app_and_bound_context():
    structlog.contextvars.clear_contextvars()
    processors = [p for p in build_processors(console=False) if p is not structlog.stdlib.add_logger_name]

    with log_context(issue_id="abc"):
        line = json.loads(_render(processors))

    assert line["app"] == APP_NAME
    assert line["issue_id"] == "abc"
    assert line["event"] == "something_happened"
    assert "timestamp" in line


def test_log_context_unbinds_on_exit():
    structlog.contextvars.clear_contextvars()

    with log_context(issue_id="abc", operation="status_update"):
        assert structlog.contextvars.get_contextvars() == {
            "issue_id": "abc",
            "operation": "status_update",
        }

    assert structlog.contextvars.get_contextvars() == {}


def test_request_id_bound_during_request():
    seen = {}
    app = create_app()

    @app.get("/whoami")
    async def read_context():
        seen.update(structlog.contextvars.get_contextvars())
        return {}

    with TestClient(app) as client:
        resp = client.get("/whoami", headers={"X-Request-ID": "req-42"})

    assert resp.status_code == 200
    assert seen["request_id"] == "req-42"
