"""Supabase-backed conversation repository."""

from dataclasses import dataclass

from supabase import Client

from linguabud_functions.domain.models import Conversation
from linguabud_functions.services.profiles import ConversationRepository


@dataclass
class SupabaseConversationRepository(ConversationRepository):
    """Supabase implementation for conversation lookups."""

    client: Client

    def get_conversation(self, conversation_id: str) -> Conversation | None:
        """Return a conversation with its participants, if present."""
        response = (
            self.client.table("conversations")
            .select("id, participants, participant_details")
            .eq("id", conversation_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Conversation(
            id=str(row["id"]),
            participants=[str(item) for item in row.get("participants") or []],
            participant_details=row.get("participant_details") or {},
        )
