"""
Recordbook: Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the three failure kinds a request
       can end in: bad input, missing record, store failure.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching HTTP status.
Who:   Raised by the validator, the record store and route handlers.

Exception Hierarchy:
    RecordbookError (base)
    ├── ValidationError          → 400 Bad Request
    │   ├── EmptyNameError
    │   ├── NameTooLongError
    │   └── AgeOutOfRangeError
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class RecordbookError(Exception):
    """
    Base exception for all Recordbook application errors.

    Attributes:
        message:  Human-readable error description (returned in the API response)
        context:  Additional debug info (logged, returned as `details` for 400s)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = dict(context or {})
        super().__init__(self.message)


class ValidationError(RecordbookError):
    """
    Raised when client input is malformed or out of bounds.

    When:    Non-numeric id/age, empty or overlong name, age out of range.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class EmptyNameError(ValidationError):
    """The name has zero length."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="name is empty", field="name", context=context)


class NameTooLongError(ValidationError):
    """The name is 100 characters or longer."""

    def __init__(self, length: int, context: Optional[Dict[str, Any]] = None):
        ctx = dict(context or {})
        ctx["length"] = length
        super().__init__(message="name is too long", field="name", context=ctx)


class AgeOutOfRangeError(ValidationError):
    """The age is negative or 200 and above."""

    def __init__(self, age: int, context: Optional[Dict[str, Any]] = None):
        ctx = dict(context or {})
        ctx["age"] = age
        super().__init__(
            message="age must be between 0 and 200", field="age", context=ctx
        )


class NotFoundError(RecordbookError):
    """
    Raised when the target of an update, delete or lookup does not exist.

    The store detects this from the rows-affected count (update/delete) or
    from an empty result (get-one) and converts it into this exception.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(RecordbookError):
    """
    Raised when a database operation fails, including rows that cannot be
    decoded into a record.

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
