"""Supabase-backed profile repository."""

from dataclasses import dataclass

from supabase import Client

from linguabud_functions.domain.models import Profile
from linguabud_functions.services.profiles import ProfileRepository

_USER_COLUMNS = "id, email, name, email_notifications"
_INSTRUCTOR_COLUMNS = (
    "id, email, name, email_notifications, stripe_account_id, "
    "price_per_lesson, currency, timezone"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user and instructor profiles."""

    client: Client

    def get_user(self, user_id: str) -> Profile | None:
        """Return the user profile for an id, if present."""
        row = self._get_row("users", _USER_COLUMNS, user_id)
        if row is None:
            return None
        return Profile(
            id=str(row["id"]),
            email=row.get("email"),
            name=row.get("name"),
            email_notifications=row.get("email_notifications"),
        )

    def get_instructor(self, instructor_id: str) -> Profile | None:
        """Return the instructor profile for an id, if present."""
        row = self._get_row("instructors", _INSTRUCTOR_COLUMNS, instructor_id)
        if row is None:
            return None
        price = row.get("price_per_lesson")
        return Profile(
            id=str(row["id"]),
            email=row.get("email"),
            name=row.get("name"),
            email_notifications=row.get("email_notifications"),
            is_instructor=True,
            stripe_account_id=row.get("stripe_account_id"),
            price_per_lesson=round(price) if price is not None else None,
            currency=row.get("currency"),
            timezone=row.get("timezone"),
        )

    def set_stripe_account_id(self, instructor_id: str, account_id: str) -> None:
        """Persist the connected account id on an instructor row."""
        self.client.table("instructors").update(
            {"stripe_account_id": account_id}
        ).eq("id", instructor_id).execute()

    def _get_row(
        self, table: str, columns: str, row_id: str
    ) -> dict[str, object] | None:
        response = (
            self.client.table(table).select(columns).eq("id", row_id).limit(1).execute()
        )
        if response.data:
            return response.data[0]
        return None
