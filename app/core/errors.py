"""
Error taxonomy shared by validation, analytics and the upstream client.

Every failure the service can report is one of a closed set of
``RatesError`` subclasses, each tagged with an ``ErrorKind``. The HTTP
layer turns them into responses through ``STATUS_BY_KIND``; nothing
else in the code base decides status codes.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_STATE = "invalid_state"
    UPSTREAM_NOT_FOUND = "upstream_not_found"
    UPSTREAM_BAD_REQUEST = "upstream_bad_request"
    UPSTREAM_OTHER = "upstream_other"


# Status for each kind. UPSTREAM_OTHER is a fallback only: the upstream
# status carried by the exception takes precedence.
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.INVALID_STATE: 500,
    ErrorKind.UPSTREAM_NOT_FOUND: 404,
    ErrorKind.UPSTREAM_BAD_REQUEST: 400,
    ErrorKind.UPSTREAM_OTHER: 502,
}


class RatesError(Exception):
    """Base class for every error the service reports."""

    kind: ErrorKind

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(RatesError):
    """The client sent a malformed currency code, date or quotation count."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidStateError(RatesError):
    """The fetched data cannot be used for the requested computation."""

    kind = ErrorKind.INVALID_STATE


class UpstreamNotFoundError(RatesError):
    """NBP has no data for the query (HTTP 404)."""

    kind = ErrorKind.UPSTREAM_NOT_FOUND

    def __init__(self, message: str = "Data not found") -> None:
        super().__init__(message)


class UpstreamBadRequestError(RatesError):
    """NBP rejected the query as outside its supported parameters (HTTP 400)."""

    kind = ErrorKind.UPSTREAM_BAD_REQUEST


class UpstreamError(RatesError):
    """Any other upstream failure; ``status_code`` is passed through."""

    kind = ErrorKind.UPSTREAM_OTHER

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def status_for(exc: RatesError) -> int:
    """Return the HTTP status code a client should see for *exc*."""
    if isinstance(exc, UpstreamError) and exc.status_code is not None:
        return exc.status_code
    return STATUS_BY_KIND[exc.kind]
