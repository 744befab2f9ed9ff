"""Contact form submissions forwarded to the operator."""

import logging
from dataclasses import dataclass

from linguabud_functions.adapters.resend_email_client import EmailClient
from linguabud_functions.domain.email_templates import contact_email
from linguabud_functions.errors import CallableError, ErrorKind

logger = logging.getLogger(__name__)


@dataclass
class ContactService:
    """Send contact form messages to the operator mailbox."""

    email_client: EmailClient
    operator_email: str

    async def send_contact_email(
        self, name: str | None, email: str | None, message: str | None
    ) -> dict[str, object]:
        """Validate the submission and forward it with the sender as reply-to."""
        if not name or not email or not message:
            raise CallableError(
                ErrorKind.INVALID_ARGUMENT, "Name, email, and message are required"
            )
        result = await self.email_client.send(
            contact_email(
                to=self.operator_email, name=name, email=email, message=message
            )
        )
        if result.error is not None:
            logger.error("Resend API error for contact form: %s", result.error.message)
            raise CallableError(ErrorKind.INTERNAL, "Failed to send message")
        logger.info("Contact email sent: %s", result.email_id)
        return {"success": True, "emailId": result.email_id}
