"""Supabase Auth access-token verification."""

import logging
from dataclasses import dataclass

from supabase import AuthError, Client

from linguabud_functions.domain.models import AuthenticatedCaller
from linguabud_functions.services.auth import AuthVerifier

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthVerifier(AuthVerifier):
    """Verify access tokens against the Supabase Auth API."""

    client: Client

    def verify(self, access_token: str) -> AuthenticatedCaller | None:
        """Return the caller for a valid token, or None when rejected."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return AuthenticatedCaller(uid=response.user.id, email=response.user.email)
