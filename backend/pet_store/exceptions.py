"""
Pet Store Backend: Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception class carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by services; caught by global handlers.
When:  During request processing.

Exception Hierarchy:
    PetStoreError (base)
    ├── ValidationError   → 400 Bad Request (id belongs to a different parent)
    ├── NotFoundError     → 404 Not Found   (referenced id does not exist)
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class PetStoreError(Exception):
    """
    Base exception for all Pet Store application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the handler says so)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PetStoreError):
    """
    Raised when a request is well-formed but violates a business rule.

    When:    An employee or customer id is addressed through the path of a
             store it does not belong to.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Employee with ID=4 does not belong to pet store with ID=1",
            "details": {"employee_id": 4, "pet_store_id": 1}
        }
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


class NotFoundError(PetStoreError):
    """
    Raised when a requested resource does not exist.

    When:    Any lookup of a pet store, employee, or customer by id comes back empty.
    HTTP:    404 Not Found

    The message always names the missing id, e.g.
    "Pet store with ID=7 was not found".
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID={resource_id} was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PetStoreError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The original
    error type is kept in `context` and only logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
