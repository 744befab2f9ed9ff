"""Resend email API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from linguabud_functions.domain.emails import (
    EmailDeliveryResult,
    EmailError,
    EmailMessage,
)


class EmailClient(Protocol):
    """Interface for transactional email delivery."""

    async def send(self, message: EmailMessage) -> EmailDeliveryResult:
        """Send an email and return the provider outcome."""


@dataclass
class HttpxResendClient(EmailClient):
    """Resend client implemented with httpx."""

    api_key: str
    from_address: str
    http_client: httpx.AsyncClient
    base_url: str = "https://api.resend.com"

    @classmethod
    def create(cls, api_key: str, from_address: str) -> "HttpxResendClient":
        """Create a Resend client with a managed httpx session."""
        return cls(
            api_key=api_key,
            from_address=from_address,
            http_client=httpx.AsyncClient(),
        )

    async def send(self, message: EmailMessage) -> EmailDeliveryResult:
        """Send an email through the Resend ``/emails`` endpoint.

        Provider rejections are returned as an ``EmailDeliveryResult`` with an
        error; transport failures propagate as ``httpx.HTTPError``.
        """
        payload: dict[str, object] = {
            "from": self.from_address,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
            "text": message.text,
        }
        if message.reply_to:
            payload["reply_to"] = message.reply_to
        response = await self.http_client.post(
            f"{self.base_url}/emails",
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=10,
        )
        if response.is_success:
            return EmailDeliveryResult(email_id=response.json().get("id"))
        return EmailDeliveryResult(error=_parse_error(response))

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _parse_error(response: httpx.Response) -> EmailError:
    """Build an EmailError from a Resend error response."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    return EmailError(
        message=str(body.get("message") or response.text or response.reason_phrase),
        status_code=int(body.get("statusCode") or response.status_code),
        name=body.get("name"),
    )
