"""
Error kinds for the portfolio API

Every failure a handler can report is one of the ErrorKind members below.
Handlers raise ApiError; a single exception handler in main.py renders it.
"""
from enum import Enum
from typing import Any, Optional

UNKNOWN_ERROR = "Unknown error"


class ErrorKind(Enum):
    CONFIGURATION = "configuration"
    INVALID_CONTENT_TYPE = "invalid_content_type"
    INVALID_JSON = "invalid_json"
    MISSING_FIELDS = "missing_fields"
    INVALID_PARAMETERS = "invalid_parameters"
    PROJECT_NOT_FOUND = "project_not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    STORAGE = "storage"
    UPSTREAM = "upstream"
    UNAVAILABLE = "unavailable"

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self]


STATUS_CODES = {
    ErrorKind.CONFIGURATION: 500,
    ErrorKind.INVALID_CONTENT_TYPE: 400,
    ErrorKind.INVALID_JSON: 400,
    ErrorKind.MISSING_FIELDS: 400,
    ErrorKind.INVALID_PARAMETERS: 400,
    ErrorKind.PROJECT_NOT_FOUND: 404,
    ErrorKind.ROUTE_NOT_FOUND: 404,
    ErrorKind.METHOD_NOT_ALLOWED: 405,
    ErrorKind.STORAGE: 500,
    ErrorKind.UPSTREAM: 502,
    ErrorKind.UNAVAILABLE: 503,
}


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are absent."""

    kind = ErrorKind.CONFIGURATION


def error_text(exc: Optional[BaseException]) -> str:
    if exc is None:
        return UNKNOWN_ERROR
    return str(exc) or UNKNOWN_ERROR


class ApiError(Exception):
    def __init__(self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None, key: str = "message"):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause
        self.key = key

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def body(self) -> Any:
        if self.kind is ErrorKind.METHOD_NOT_ALLOWED:
            return self.message
        payload = {self.key: self.message}
        if self.kind in (ErrorKind.STORAGE, ErrorKind.UPSTREAM):
            payload["error"] = error_text(self.cause)
        return payload

    @classmethod
    def storage(cls, message: str, cause: Optional[BaseException]) -> "ApiError":
        return cls(ErrorKind.STORAGE, message, cause)


def methods_not_implemented() -> ApiError:
    return ApiError(ErrorKind.METHOD_NOT_ALLOWED, "Methods not implemented")


def no_route_found() -> ApiError:
    return ApiError(ErrorKind.ROUTE_NOT_FOUND, "No Route Found")
