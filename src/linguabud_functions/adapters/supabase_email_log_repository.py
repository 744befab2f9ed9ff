"""Supabase repository for email delivery log entries."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from supabase import Client

from linguabud_functions.domain.models import DeliveryLogEntry
from linguabud_functions.services.email_log import EmailLogRepository


@dataclass
class SupabaseEmailLogRepository(EmailLogRepository):
    """Supabase-backed email log repository."""

    client: Client

    def create_entry(self, entry: DeliveryLogEntry) -> None:
        """Insert an email log row, omitting unset columns."""
        row = {key: value for key, value in asdict(entry).items() if value is not None}
        row["sent_at"] = datetime.now(tz=UTC).isoformat()
        self.client.table("email_log").insert(row).execute()
