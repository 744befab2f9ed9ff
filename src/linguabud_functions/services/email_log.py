"""Delivery log for attempted email sends."""

from dataclasses import dataclass
from typing import Protocol

from linguabud_functions.domain.models import DeliveryLogEntry


class EmailLogRepository(Protocol):
    """Persistence interface for email delivery log entries."""

    def create_entry(self, entry: DeliveryLogEntry) -> None:
        """Append a delivery log entry."""


@dataclass
class EmailLogService:
    """Service for recording email delivery outcomes."""

    repository: EmailLogRepository

    def record(self, entry: DeliveryLogEntry) -> None:
        """Persist a delivery log entry."""
        self.repository.create_entry(entry)
