"""
FastAPI application entry point.

Uses structured logging from community_issues.logging. The module-level `app`
is what a serverless host imports; serve() starts a local uvicorn listener
unless ENV is production.
"""

from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from community_issues.logging import configure_logging, get_logger
from community_issues.repositories import IssueRepository

from .config import Settings, get_settings
from .error_handlers import register_exception_handlers
from .middleware.request_id import RequestIDMiddleware
from .routers import issues as issues_router
from .schemas import HealthResponse
from .status_page import render_status_page


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Middleware to limit request body size."""

    def __init__(self, app, max_size_kb: int = 100):
        super().__init__(app)
        self.max_size = max_size_kb * 1024  # Convert to bytes
        self.max_size_kb = max_size_kb

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Check Content-Length header if present
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_size:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"error": "Request too large"},
            )

        return await call_next(request)


# Configure structured logging
settings = get_settings()
configure_logging(level="DEBUG" if settings.debug else "INFO")
logger = get_logger("api")


def create_app(
    app_settings: Settings | None = None,
    repository: IssueRepository | None = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        app_settings: Settings to use instead of the cached environment settings.
        repository: Issue store to serve; a fresh empty one is created if omitted.
    """
    app_settings = app_settings or settings

    app = FastAPI(title=app_settings.app_name, debug=app_settings.debug)
    app.state.settings = app_settings
    app.state.issue_repository = repository if repository is not None else IssueRepository()

    app.add_middleware(RequestSizeLimitMiddleware, max_size_kb=app_settings.max_request_size_kb)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Added last so request ids and request logs wrap every other layer
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        logger.info(
            "app_startup",
            app_name=app_settings.app_name,
            env=app_settings.env,
            port=app_settings.port,
        )

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("app_shutdown", issue_count=len(app.state.issue_repository))

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def status_page():
        return render_status_page(app_settings.app_name, app_settings.port, app_settings.api_prefix)

    @app.get("/health", tags=["health"], response_model=HealthResponse)
    def health_check():
        """Health check endpoint (liveness probe)."""
        return {"status": "ok"}

    app.include_router(issues_router.router, prefix=app_settings.api_prefix)

    return app


app = create_app()


def serve(app_settings: Settings | None = None) -> bool:
    """
    Start a uvicorn listener for `app` unless running in production mode.

    Returns True if a listener was started (and has since stopped).
    """
    app_settings = app_settings or settings
    if app_settings.is_production:
        logger.info("listener_skipped", reason="production mode expects an external host")
        return False

    import uvicorn

    target = app if app_settings is settings else create_app(app_settings)
    logger.info("api_listening", host=app_settings.host, port=app_settings.port)
    uvicorn.run(target, host=app_settings.host, port=app_settings.port, log_config=None)
    return True


if __name__ == "__main__":
    serve()
