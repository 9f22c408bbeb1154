"""
Domain errors raised by the issue repository.

Each error carries the HTTP status code the API answers with, so the
FastAPI exception handlers stay a thin translation layer.
"""


class IssueReporterError(Exception):
    """Base class for errors the API reports to clients."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(IssueReporterError):
    """Raised for a missing required field or an unknown status value."""

    status_code = 400

    def __init__(self, message: str, fields: list[str] | None = None):
        self.fields = fields or []
        super().__init__(message)


class NotFoundError(IssueReporterError):
    """Raised when an issue id is unknown."""

    status_code = 404


__all__ = ["IssueReporterError", "ValidationError", "NotFoundError"]
