"""
Middleware that tags every request with an ID and logs it.

A client-supplied X-Request-ID is reused when it looks sane; otherwise a new
one is generated. The ID is stored in the ASGI scope, bound to the structlog
context for the lifetime of the request, and echoed in the response. One
request_started / request_complete pair is logged per request.
"""

import re
import time
import uuid

import structlog
from starlette.datastructures import Headers, MutableHeaders

from community_issues.logging import get_logger

REQUEST_ID_HEADER = "X-Request-ID"

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

logger = get_logger("http")


def resolve_request_id(incoming: str | None) -> str:
    """Return `incoming` if it is a short token, otherwise a fresh UUID."""
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


def _log_level_for(status_code: int) -> str:
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"


class RequestIDMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = resolve_request_id(Headers(scope=scope).get(REQUEST_ID_HEADER))
        scope.setdefault("state", {})["request_id"] = request_id
        method, path = scope.get("method", ""), scope.get("path", "")
        status_code = 500

        async def send_with_request_id(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                MutableHeaders(scope=message)[REQUEST_ID_HEADER] = request_id
            await send(message)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        started = time.perf_counter()
        logger.info("request_started", method=method, path=path)
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            getattr(logger, _log_level_for(status_code))(
                "request_complete",
                method=method,
                path=path,
                status_code=status_code,
                duration_seconds=round(time.perf_counter() - started, 3),
            )
            structlog.contextvars.clear_contextvars()
