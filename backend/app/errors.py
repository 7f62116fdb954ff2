"""
Typed API errors.

Every handler failure carries a machine-checkable code, a human-readable
message and the HTTP status it is rendered with. Handlers registered in
app.main turn these into the standard error envelope:

    {"success": false, "error": {"code": "...", "message": "..."}}
"""

from typing import Any, Dict, Optional


class CaptionStudioError(Exception):
    """Base class for errors raised by route handlers and guards."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        error: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return error


class UnauthorizedError(CaptionStudioError):
    """No authenticated identity on the request."""

    code = "UNAUTHORIZED"
    status_code = 401


class ForbiddenError(CaptionStudioError):
    """Row exists but belongs to someone else."""

    code = "FORBIDDEN"
    status_code = 403


class NotFoundError(CaptionStudioError):
    """Row is absent, or is not visible to the acting user."""

    code = "NOT_FOUND"
    status_code = 404


class InvalidInputError(CaptionStudioError):
    """Request body failed shape or refinement validation."""

    code = "INVALID_INPUT"
    status_code = 422
