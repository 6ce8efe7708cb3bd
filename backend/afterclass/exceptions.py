"""
Afterclass API: Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the client-error cases the API reports.
How:   Each exception carries a message and optional context dict. Global
       exception handlers (registered in main.py) catch these and return
       JSON error responses with the matching HTTP status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    AfterclassError (base)
    ├── ValidationError   → 400 Bad Request
    └── NotFoundError     → 404 Not Found

Store failures (pymongo.errors.PyMongoError) are not wrapped; they reach the
500 handler directly.
"""

from typing import Any, Dict, Optional


class AfterclassError(Exception):
    """
    Base exception for all Afterclass application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only as `details`)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(AfterclassError):
    """
    Raised when client input fails validation.

    When:    Malformed identifier, unusable update body, incomplete order payload.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Invalid id", "code": "validation_error", "request_id": "a1b2c3d4"}
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


class NotFoundError(AfterclassError):
    """
    Raised when a requested document does not exist.

    When:    GET /lessons/{id} with a well-formed id that matches nothing.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
