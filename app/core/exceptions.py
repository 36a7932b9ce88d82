"""
Application exceptions.

Every error carries a machine-readable ``kind`` so the API layer can map it
to an HTTP status code without inspecting messages.
"""

import enum
from typing import Optional


class ErrorKind(str, enum.Enum):
    INVALID_INPUT = "invalid_input"
    BAD_PARAMETER = "bad_parameter"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class JoblyError(Exception):
    """Base exception for all Jobly errors."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidInputError(JoblyError):
    """Raised when a request payload cannot be used at all (e.g. an empty update)."""

    kind = ErrorKind.INVALID_INPUT


class BadParameterError(JoblyError):
    """
    Raised when a single query parameter fails validation.

    Attributes:
        param: Name of the offending parameter, as it appears in the query string
    """

    kind = ErrorKind.BAD_PARAMETER

    def __init__(self, param: str, message: Optional[str] = None):
        super().__init__(message or f"Invalid value for parameter '{param}'", {"param": param})
        self.param = param


class NotFoundError(JoblyError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(JoblyError):
    kind = ErrorKind.CONFLICT
