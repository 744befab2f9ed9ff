"""Database webhook endpoints for newly inserted rows.

These endpoints acknowledge every authorized delivery, even when the
notification fails, so the database never redelivers an event.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from pydantic import ValidationError

from linguabud_functions.api.models import (
    BookingRecord,
    DatabaseWebhookPayload,
    MessageRecord,
)
from linguabud_functions.domain.models import Booking, Message

if TYPE_CHECKING:
    from linguabud_functions.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


def _get_webhook_secret(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.webhook_secret


async def require_webhook_secret(
    x_webhook_secret: str | None = Header(default=None),
    webhook_secret: str = Depends(_get_webhook_secret),
) -> None:
    """Ensure requests carry the shared webhook secret."""
    if not x_webhook_secret or x_webhook_secret != webhook_secret:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/messages", dependencies=[Depends(require_webhook_secret)])
async def message_created(
    payload: DatabaseWebhookPayload, request: Request
) -> dict[str, str]:
    """Send an email notification for a newly created message."""
    if payload.type != "INSERT" or payload.record is None:
        return {"status": "ignored"}
    try:
        record = MessageRecord.model_validate(payload.record)
    except ValidationError:
        logger.exception("Invalid message record")
        return {"status": "ignored"}
    container: AppContainer = request.app.state.container
    await container.message_notification_service.handle_message_created(
        Message(
            id=record.id,
            conversation_id=record.conversation_id,
            sender_id=record.sender_id,
            text=record.text or "",
        )
    )
    return {"status": "ok"}


@router.post("/bookings", dependencies=[Depends(require_webhook_secret)])
async def booking_created(
    payload: DatabaseWebhookPayload, request: Request
) -> dict[str, str]:
    """Send an email notification for a newly created booking."""
    if payload.type != "INSERT" or payload.record is None:
        return {"status": "ignored"}
    try:
        record = BookingRecord.model_validate(payload.record)
    except ValidationError:
        logger.exception("Invalid booking record")
        return {"status": "ignored"}
    container: AppContainer = request.app.state.container
    await container.booking_notification_service.handle_booking_created(
        Booking(
            id=record.id,
            instructor_id=record.instructor_id,
            student_id=record.student_id,
            scheduled_at=record.scheduled_at,
            amount=record.amount,
            currency=record.currency,
            timezone=record.timezone,
            student_name=record.student_name,
        )
    )
    return {"status": "ok"}
