"""Typed errors returned by callable handlers."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Error vocabulary shared with callable clients."""

    INVALID_ARGUMENT = "invalid-argument"
    FAILED_PRECONDITION = "failed-precondition"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not-found"
    INTERNAL = "internal"

    @property
    def status(self) -> str:
        """Wire status string, e.g. ``INVALID_ARGUMENT``."""
        return self.value.replace("-", "_").upper()

    @property
    def http_status(self) -> int:
        """HTTP status code used for the error response."""
        return _HTTP_STATUS[self]

    @classmethod
    def from_status(cls, status: str) -> "ErrorKind":
        """Parse a wire status string, defaulting to internal."""
        for kind in cls:
            if kind.status == status:
                return kind
        return cls.INTERNAL


_HTTP_STATUS = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.FAILED_PRECONDITION: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class CallableError(Exception):
    """Error surfaced to the caller of a callable handler."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_payload(self) -> dict[str, object]:
        """Return the error envelope sent over the wire."""
        return {"error": {"status": self.kind.status, "message": self.message}}
