from typing import Any, Dict, Optional


def error_body(message: str, code: str) -> Dict[str, Any]:
    """Error envelope shared by every non-2xx response."""
    return {"success": False, "error": {"message": message, "code": code}}


class AppError(Exception):
    """Client-facing error with an HTTP status and a short machine-readable code."""

    status_code = 500
    code = "INTERNAL_ERROR"
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.message, self.code)


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class UnauthorizedError(AppError):
    status_code = 401
    code = "UNAUTHORIZED"
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    code = "FORBIDDEN"
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Resource not found"
