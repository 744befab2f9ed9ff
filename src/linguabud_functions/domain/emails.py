"""Domain models for outbound email."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailMessage:
    """A formatted email ready for delivery."""

    to: str
    subject: str
    html: str
    text: str
    reply_to: str | None = None


@dataclass(frozen=True)
class EmailError:
    """Error reported by the email provider."""

    message: str
    status_code: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class EmailDeliveryResult:
    """Outcome of a send: a provider id on success, an error otherwise."""

    email_id: str | None = None
    error: EmailError | None = None
