"""
Noteboard Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the board/card API and the
       canvas sync client.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) turn the server
       side ones into `{"success": false, "error": ...}` JSON bodies.
Who:   Raised by services and routes; SyncError is raised by the canvas
       HTTP client.

Exception Hierarchy:
    NoteboardError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    ├── DatabaseError     → 500 Internal Server Error (generic body)
    └── SyncError         → client side: an API call did not succeed
"""

from typing import Any, Dict, Optional


class NoteboardError(Exception):
    """
    Base exception for all Noteboard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteboardError):
    """
    Raised when client input fails validation.

    When:    Missing or non-positive id, no updatable fields in a card patch,
             malformed JSON body or query parameter.
    HTTP:    400 Bad Request

    Example response:
        {"success": false, "error": "Missing id", "request_id": "a1b2c3d4"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NoteboardError):
    """
    Raised when a requested board or card does not exist.

    SQLAlchemy returns None (or a zero rowcount) for missing records; the
    service layer converts that into this exception.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(NoteboardError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    The body returned to the client is always the generic "Database error";
    `message` and `context` are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class SyncError(NoteboardError):
    """
    Raised by the canvas client when an API call fails.

    Covers transport failures, non-2xx statuses, and bodies whose
    `success` flag is not true. There is no retry; callers log it and
    keep their local state.
    """

    def __init__(
        self,
        message: str = "Sync with the board API failed",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
