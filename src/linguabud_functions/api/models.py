"""Pydantic models for webhook and callable payloads."""

from pydantic import BaseModel, ConfigDict, Field


class DatabaseWebhookPayload(BaseModel):
    """Supabase database webhook envelope."""

    type: str
    table: str
    db_schema: str | None = Field(default=None, alias="schema")
    record: dict[str, object] | None = None
    old_record: dict[str, object] | None = None


class MessageRecord(BaseModel):
    """Inserted row of the messages table."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    conversation_id: str
    sender_id: str
    text: str | None = None


class BookingRecord(BaseModel):
    """Inserted row of the bookings table."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    instructor_id: str
    student_id: str | None = None
    student_name: str | None = None
    scheduled_at: str | None = None
    amount: int | None = None
    currency: str | None = None
    timezone: str | None = None


class CallableRequest(BaseModel):
    """Callable request body: arguments wrapped in ``data``."""

    data: dict[str, object] = Field(default_factory=dict)
