"""Domain models for Lingua Bud records."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Profile:
    """A user or instructor profile."""

    id: str
    email: str | None
    name: str | None = None
    email_notifications: bool | None = None
    is_instructor: bool = False
    stripe_account_id: str | None = None
    price_per_lesson: int | None = None
    currency: str | None = None
    timezone: str | None = None

    @property
    def notifications_enabled(self) -> bool:
        """Email notifications are on unless explicitly turned off."""
        return self.email_notifications is not False


@dataclass(frozen=True)
class Conversation:
    """A conversation between participants."""

    id: str
    participants: list[str]
    participant_details: dict[str, dict[str, object]] = field(default_factory=dict)

    def recipient_for(self, sender_id: str) -> str | None:
        """Return the first participant that is not the sender."""
        for participant in self.participants:
            if participant != sender_id:
                return participant
        return None

    def display_name(self, participant_id: str) -> str | None:
        """Return the stored display name for a participant."""
        details = self.participant_details.get(participant_id) or {}
        name = details.get("name")
        return str(name) if name else None


@dataclass(frozen=True)
class Message:
    """A message posted to a conversation."""

    id: str
    conversation_id: str
    sender_id: str
    text: str


@dataclass(frozen=True)
class Booking:
    """A lesson booked by a student with an instructor."""

    id: str
    instructor_id: str
    student_id: str | None
    scheduled_at: str | None
    amount: int | None = None
    currency: str | None = None
    timezone: str | None = None
    student_name: str | None = None


@dataclass(frozen=True)
class DeliveryLogEntry:
    """Audit record of an attempted email send."""

    status: str
    recipient_id: str | None = None
    recipient_email: str | None = None
    sender_id: str | None = None
    conversation_id: str | None = None
    message_id: str | None = None
    booking_id: str | None = None
    type: str | None = None
    email_id: str | None = None
    error: str | None = None
    error_code: int | None = None


@dataclass(frozen=True)
class AuthenticatedCaller:
    """Identity of the caller of a callable handler."""

    uid: str
    email: str | None = None
