# app/core/errors.py
from typing import Any


class AppError(Exception):
    """Failure that crosses the HTTP boundary with a status, a machine code and optional details."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict[str, Any]:
        error: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details is not None:
            error["details"] = self.details
        return {"success": False, "error": error}


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")
        self.resource = resource


class BadRequestError(AppError):
    status_code = 400
    code = "BAD_REQUEST"


class RequestValidationFailed(AppError):
    status_code = 422
    code = "VALIDATION_ERROR"

    def __init__(self, violations: list[dict[str, str]], message: str = "Validation failed"):
        super().__init__(message, details=violations)


class InternalError(AppError):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


__all__ = [
    "AppError",
    "NotFoundError",
    "BadRequestError",
    "RequestValidationFailed",
    "InternalError",
]
