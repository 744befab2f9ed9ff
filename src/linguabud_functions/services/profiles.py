"""Profile lookups across the users and instructors tables."""

from dataclasses import dataclass
from typing import Protocol

from linguabud_functions.domain.models import Conversation, Profile


class ProfileRepository(Protocol):
    """Persistence interface for user and instructor profiles."""

    def get_user(self, user_id: str) -> Profile | None:
        """Return the user profile for an id, if present."""

    def get_instructor(self, instructor_id: str) -> Profile | None:
        """Return the instructor profile for an id, if present."""

    def set_stripe_account_id(self, instructor_id: str, account_id: str) -> None:
        """Persist the connected account id on an instructor profile."""


class ConversationRepository(Protocol):
    """Persistence interface for conversations."""

    def get_conversation(self, conversation_id: str) -> Conversation | None:
        """Return a conversation, if present."""


@dataclass
class ProfileService:
    """Service resolving profiles for notifications and payments."""

    repository: ProfileRepository

    def resolve(self, profile_id: str) -> Profile | None:
        """Return the instructor profile if one exists, else the user profile."""
        instructor = self.repository.get_instructor(profile_id)
        if instructor is not None:
            return instructor
        return self.repository.get_user(profile_id)

    def get_instructor(self, instructor_id: str) -> Profile | None:
        """Return an instructor profile."""
        return self.repository.get_instructor(instructor_id)

    def get_user(self, user_id: str) -> Profile | None:
        """Return a user profile."""
        return self.repository.get_user(user_id)

    def set_stripe_account_id(self, instructor_id: str, account_id: str) -> None:
        """Record the connected account for an instructor."""
        self.repository.set_stripe_account_id(instructor_id, account_id)
