"""
Module: exceptions.

Application error taxonomy. Services raise these; the handlers registered in
``vetclinic.main`` turn them into JSON responses:

    ClinicError (base)
    ├── ValidationError  -> 400
    ├── NotFoundError    -> 404
    └── InternalError    -> 500
"""

from typing import Any


class ClinicError(Exception):
    """Base class for errors that carry a client-safe message."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred", context: dict[str, Any] | None = None):
        self.message = message
        # Logged, never returned to the client.
        self.context = context or {}
        super().__init__(message)


class ValidationError(ClinicError):
    """Missing or malformed input the caller can fix."""

    status_code = 400
    code = "validation_error"

    def __init__(self, message: str = "Validation failed", field: str | None = None, context: dict[str, Any] | None = None):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ClinicError):
    """The referenced row does not exist."""

    status_code = 404
    code = "not_found"

    def __init__(self, resource: str = "Resource", message: str | None = None, context: dict[str, Any] | None = None):
        ctx = context or {}
        ctx["resource"] = resource
        super().__init__(message=message or f"{resource} not found", context=ctx)
        self.resource = resource


class InternalError(ClinicError):
    """A store operation failed or touched an unexpected number of rows."""

    status_code = 500
    code = "internal_error"
