"""
Application errors raised by the persistence and API layers.

Each error carries an HTTP status code and a short machine-readable code;
the exception handler in main.py turns them into JSON responses.
"""
from typing import Optional


class SoulSyncError(Exception):
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(SoulSyncError):
    """Raised when a record does not exist or is not visible to the current user."""
    status_code = 404
    error_code = "not_found"

    def __init__(self, resource: str, resource_id: Optional[object] = None):
        message = f"{resource} not found" if resource_id is None else f"{resource} {resource_id} not found"
        super().__init__(message, details=f"id={resource_id}" if resource_id is not None else None)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(SoulSyncError):
    status_code = 409
    error_code = "conflict"


class ValidationError(SoulSyncError):
    """Raised when a request is well-formed but not acceptable."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field
