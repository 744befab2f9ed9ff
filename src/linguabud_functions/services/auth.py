"""Caller authentication for callable handlers."""

from dataclasses import dataclass
from typing import Protocol

from linguabud_functions.domain.models import AuthenticatedCaller
from linguabud_functions.errors import CallableError, ErrorKind


class AuthVerifier(Protocol):
    """Interface for verifying caller access tokens."""

    def verify(self, access_token: str) -> AuthenticatedCaller | None:
        """Return the caller for a valid token, or None."""


@dataclass
class AuthService:
    """Resolve the caller of a callable request."""

    verifier: AuthVerifier

    def optional_caller(self, authorization: str | None) -> AuthenticatedCaller | None:
        """Return the caller if a valid bearer token was sent."""
        token = _bearer_token(authorization)
        if token is None:
            return None
        return self.verifier.verify(token)

    def require_caller(self, authorization: str | None) -> AuthenticatedCaller:
        """Return the caller or raise an unauthenticated error."""
        caller = self.optional_caller(authorization)
        if caller is None:
            raise CallableError(
                ErrorKind.UNAUTHENTICATED, "User must be authenticated"
            )
        return caller


def _bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
