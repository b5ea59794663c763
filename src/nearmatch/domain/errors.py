"""
Domain errors.

Service functions raise these before touching any state; the API layer maps
them onto HTTP responses using `status_code` and `code`.
"""

from __future__ import annotations


class NearMatchError(Exception):
    """Base class for all expected, caller-facing failures."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def as_detail(self) -> dict[str, str]:
        detail = {"code": self.code, "message": self.message}
        if self.hint:
            detail["hint"] = self.hint
        return detail


class ValidationError(NearMatchError):
    """A required field is missing or malformed."""

    status_code = 400
    code = "VALIDATION_ERROR"


class NotFoundError(NearMatchError):
    """A referenced user or match does not exist."""

    status_code = 404
    code = "NOT_FOUND"


class ForbiddenError(NearMatchError):
    """Wrong actor, wrong match state, or unrevealed identity."""

    status_code = 403
    code = "FORBIDDEN"
