"""Email notifications triggered by new messages and bookings.

Handlers in this module never raise. A failed notification must not fail the
database write that triggered it, so every error is logged, recorded in the
email log where possible, and swallowed.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from linguabud_functions.adapters.resend_email_client import EmailClient
from linguabud_functions.config import (
    DEFAULT_SENDER_NAME,
    DEFAULT_STUDENT_NAME,
    MESSAGE_PREVIEW_LENGTH,
)
from linguabud_functions.domain.email_templates import (
    booking_notification_email,
    message_notification_email,
)
from linguabud_functions.domain.models import Booking, DeliveryLogEntry, Message
from linguabud_functions.domain.payments import format_minor_units
from linguabud_functions.services.email_log import EmailLogService
from linguabud_functions.services.profiles import (
    ConversationRepository,
    ProfileService,
)

logger = logging.getLogger(__name__)

BOOKING_NOTIFICATION_TYPE = "bookingNotification"
HOURS_PER_PERIOD = 12


def build_preview(text: str, limit: int = MESSAGE_PREVIEW_LENGTH) -> str:
    """Return ``text`` truncated to ``limit`` characters plus an ellipsis."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


@dataclass
class MessageNotificationService:
    """Email the other participant when a message is posted."""

    conversation_repository: ConversationRepository
    profile_service: ProfileService
    email_client: EmailClient
    email_log: EmailLogService
    messages_url: str
    settings_url: str

    async def handle_message_created(self, message: Message) -> None:
        """Notify the recipient of a new message, swallowing all errors."""
        try:
            await self._notify(message)
        except Exception as exc:
            logger.exception(
                "Error sending message notification",
                extra={"conversation_id": message.conversation_id},
            )
            _record_quietly(
                self.email_log,
                DeliveryLogEntry(
                    status="failed",
                    conversation_id=message.conversation_id,
                    message_id=message.id,
                    sender_id=message.sender_id,
                    error=str(exc),
                ),
            )

    async def _notify(self, message: Message) -> None:
        conversation = self.conversation_repository.get_conversation(
            message.conversation_id
        )
        if conversation is None:
            logger.info("Conversation not found: %s", message.conversation_id)
            return

        recipient_id = conversation.recipient_for(message.sender_id)
        if recipient_id is None:
            logger.info("No recipient found for message %s", message.id)
            return

        recipient = self.profile_service.resolve(recipient_id)
        if recipient is None:
            logger.info("Recipient not found: %s", recipient_id)
            return
        if not recipient.notifications_enabled:
            logger.info("Email notifications disabled for user: %s", recipient_id)
            return
        if not recipient.email:
            logger.info("Recipient has no email address: %s", recipient_id)
            return

        sender_name = (
            conversation.display_name(message.sender_id) or DEFAULT_SENDER_NAME
        )
        email = message_notification_email(
            to=recipient.email,
            sender_name=sender_name,
            preview=build_preview(message.text),
            messages_url=self.messages_url,
            settings_url=self.settings_url,
        )
        result = await self.email_client.send(email)

        if result.error is not None:
            logger.error("Resend API error: %s", result.error.message)
            self.email_log.record(
                DeliveryLogEntry(
                    status="failed",
                    recipient_id=recipient_id,
                    recipient_email=recipient.email,
                    sender_id=message.sender_id,
                    conversation_id=message.conversation_id,
                    message_id=message.id,
                    error=result.error.message,
                    error_code=result.error.status_code,
                )
            )
            return

        logger.info("Message notification sent: %s", result.email_id)
        self.email_log.record(
            DeliveryLogEntry(
                status="sent",
                recipient_id=recipient_id,
                recipient_email=recipient.email,
                sender_id=message.sender_id,
                conversation_id=message.conversation_id,
                message_id=message.id,
                email_id=result.email_id,
            )
        )


@dataclass
class BookingNotificationService:
    """Email the instructor when a lesson is booked."""

    profile_service: ProfileService
    email_client: EmailClient
    email_log: EmailLogService
    dashboard_url: str

    async def handle_booking_created(self, booking: Booking) -> None:
        """Notify the instructor of a new booking, swallowing all errors."""
        try:
            await self._notify(booking)
        except Exception as exc:
            logger.exception(
                "Error sending booking notification",
                extra={"booking_id": booking.id},
            )
            _record_quietly(
                self.email_log,
                DeliveryLogEntry(
                    status="failed",
                    type=BOOKING_NOTIFICATION_TYPE,
                    recipient_id=booking.instructor_id,
                    sender_id=booking.student_id,
                    booking_id=booking.id,
                    error=str(exc),
                ),
            )

    async def _notify(self, booking: Booking) -> None:
        instructor = self.profile_service.get_instructor(booking.instructor_id)
        if instructor is None or not instructor.email:
            logger.info("Instructor has no email address: %s", booking.instructor_id)
            return

        student_name = self._student_name(booking)
        date_text, time_text = format_schedule(
            booking.scheduled_at, instructor.timezone or booking.timezone
        )
        amount_text = (
            format_minor_units(booking.amount, booking.currency)
            if booking.amount is not None
            else None
        )
        email = booking_notification_email(
            to=instructor.email,
            instructor_name=instructor.name,
            student_name=student_name,
            date_text=date_text,
            time_text=time_text,
            amount_text=amount_text,
            dashboard_url=self.dashboard_url,
        )
        result = await self.email_client.send(email)

        if result.error is not None:
            logger.error("Resend API error for booking: %s", result.error.message)
            self.email_log.record(
                DeliveryLogEntry(
                    status="failed",
                    type=BOOKING_NOTIFICATION_TYPE,
                    recipient_id=booking.instructor_id,
                    recipient_email=instructor.email,
                    sender_id=booking.student_id,
                    booking_id=booking.id,
                    error=result.error.message,
                    error_code=result.error.status_code,
                )
            )
            return

        logger.info("Booking notification sent: %s", result.email_id)
        self.email_log.record(
            DeliveryLogEntry(
                status="sent",
                type=BOOKING_NOTIFICATION_TYPE,
                recipient_id=booking.instructor_id,
                recipient_email=instructor.email,
                sender_id=booking.student_id,
                booking_id=booking.id,
                email_id=result.email_id,
            )
        )

    def _student_name(self, booking: Booking) -> str:
        if booking.student_id:
            student = self.profile_service.get_user(booking.student_id)
            if student is not None and student.name:
                return student.name
        return booking.student_name or DEFAULT_STUDENT_NAME


def format_schedule(
    scheduled_at: str | None, timezone_name: str | None
) -> tuple[str | None, str | None]:
    """Format an ISO timestamp as date and time strings in a timezone."""
    if not scheduled_at:
        return None, None
    try:
        moment = datetime.fromisoformat(scheduled_at.replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Unparseable booking time: %s", scheduled_at)
        return None, None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    local = moment.astimezone(_zone(timezone_name))
    date_text = f"{local:%A, %B} {local.day}, {local.year}"
    hour = local.hour % HOURS_PER_PERIOD or HOURS_PER_PERIOD
    period = "AM" if local.hour < HOURS_PER_PERIOD else "PM"
    time_text = f"{hour}:{local:%M} {period}"
    return date_text, time_text


def _record_quietly(email_log: EmailLogService, entry: DeliveryLogEntry) -> None:
    try:
        email_log.record(entry)
    except Exception:
        logger.exception("Failed to write email log entry")


def _zone(timezone_name: str | None) -> ZoneInfo:
    try:
        return ZoneInfo(timezone_name or "UTC")
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %s, using UTC", timezone_name)
        return ZoneInfo("UTC")
