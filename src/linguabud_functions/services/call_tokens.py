"""Video call token issuance."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from linguabud_functions.config import CALL_TOKEN_TTL_SECONDS
from linguabud_functions.domain.calls import CallToken
from linguabud_functions.errors import CallableError, ErrorKind

logger = logging.getLogger(__name__)


class TokenSigner(Protocol):
    """Interface for signing call channel tokens."""

    def sign_publisher_token(  # noqa: PLR0913
        self,
        *,
        app_id: str,
        app_certificate: str,
        channel_name: str,
        uid: int,
        expires_at: int,
    ) -> str:
        """Return a token allowing publish and subscribe on a channel."""


@dataclass
class CallTokenService:
    """Issue time-bounded tokens for video call channels."""

    signer: TokenSigner
    app_id: str
    app_certificate: str | None
    ttl_seconds: int = CALL_TOKEN_TTL_SECONDS
    clock: Callable[[], float] = field(default=time.time)

    def generate(self, channel_name: str | None, uid: int | None = None) -> CallToken:
        """Sign a publisher token for ``channel_name``.

        A missing or zero ``uid`` lets the call service assign one.
        """
        if not channel_name:
            raise CallableError(ErrorKind.INVALID_ARGUMENT, "Channel name is required")
        if not self.app_certificate:
            raise CallableError(
                ErrorKind.FAILED_PRECONDITION,
                "Agora App Certificate not configured. "
                "Please set AGORA_APP_CERTIFICATE in the environment.",
            )
        user_uid = uid or 0
        expires_at = int(self.clock()) + self.ttl_seconds
        token = self.signer.sign_publisher_token(
            app_id=self.app_id,
            app_certificate=self.app_certificate,
            channel_name=channel_name,
            uid=user_uid,
            expires_at=expires_at,
        )
        logger.info("Generated call token for channel %s uid %s", channel_name, user_uid)
        return CallToken(
            token=token, uid=user_uid, app_id=self.app_id, expires_at=expires_at
        )
