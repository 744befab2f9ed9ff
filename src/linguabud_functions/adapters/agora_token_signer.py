"""Agora RTC token signer."""

from dataclasses import dataclass

from agora_token_builder import RtcTokenBuilder
from agora_token_builder.RtcTokenBuilder import Role_Publisher

from linguabud_functions.services.call_tokens import TokenSigner


@dataclass
class AgoraTokenSigner(TokenSigner):
    """Sign RTC tokens with the Agora token builder."""

    def sign_publisher_token(  # noqa: PLR0913
        self,
        *,
        app_id: str,
        app_certificate: str,
        channel_name: str,
        uid: int,
        expires_at: int,
    ) -> str:
        """Build a publisher token, which also grants subscribing."""
        return RtcTokenBuilder.buildTokenWithUid(
            app_id, app_certificate, channel_name, uid, Role_Publisher, expires_at
        )
