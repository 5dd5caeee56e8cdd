"""
StudyPlanner Backend: Error Model
==================================

What:  The closed set of error kinds a request can end in.
Why:   Every validation, authorization and lookup failure is reported through
       one of these instead of an ad-hoc response, so each request is
       answered exactly once with `{"error": "<message>"}`.
How:   Each class fixes an HTTP status code and carries a message plus an
       optional context dict. The dispatcher (`routes/base.py`) and the
       global handlers in `main.py` turn them into JSON responses.
Who:   Raised by the request extractor, the authorization policy, schemas
       and resource handlers.

Exception Hierarchy:
    StudyPlannerError (base)        → 500
    ├── BadRequestError             → 400 (malformed JSON, bad field, missing field)
    ├── UnauthorizedError           → 401 (missing auth headers, bad credentials)
    ├── ForbiddenError              → 403 (authenticated but not entitled)
    ├── NotFoundError               → 404 (resource absent)
    ├── MethodNotAllowedError       → 405 (no hook for the HTTP method)
    ├── ConflictError               → 409 (duplicate email)
    └── InternalError               → 500 (persistence failure)
"""

from typing import Any, Dict, Optional


class StudyPlannerError(Exception):
    """
    Base exception for all StudyPlanner application errors.

    Attributes:
        message:  Client-facing text, returned verbatim in the `error` field
        context:  Additional debug info (logged, never returned to the client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def to_body(self) -> Dict[str, str]:
        """The JSON body written for this error."""
        return {"error": self.message}


class BadRequestError(StudyPlannerError):
    """
    Client input could not be used as sent.

    When:    Invalid JSON, an unparseable id/date/time/enum, or a missing field.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Bad Request",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(StudyPlannerError):
    """Missing `student_id`/`role` headers, or a failed login. HTTP 401."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class ForbiddenError(StudyPlannerError):
    """The caller is known but does not own the resource. HTTP 403."""

    status_code = 403

    def __init__(
        self,
        message: str = "Forbidden: Insufficient permissions",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(StudyPlannerError):
    """
    Raised when a requested resource does not exist.

    Repositories return None for missing rows; handlers convert that into
    this exception with a resource-specific message such as
    "Course not found".
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Not Found",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class MethodNotAllowedError(StudyPlannerError):
    """No handler hook exists for the request's HTTP method. HTTP 405."""

    status_code = 405

    def __init__(self, method: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        if method:
            ctx["method"] = method
        super().__init__(message="Method Not Allowed", context=ctx)


class ConflictError(StudyPlannerError):
    """A unique value (student email) is already taken. HTTP 409."""

    status_code = 409

    def __init__(self, message: str = "Conflict", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class InternalError(StudyPlannerError):
    """
    A repository call reported failure.

    The message is the handler's own ("Failed to add course"); the underlying
    database error has already been logged by the repository.
    HTTP: 500 Internal Server Error
    """

    status_code = 500
