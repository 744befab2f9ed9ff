"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from types import SimpleNamespace

from supabase import AuthError

from linguabud_functions.adapters.supabase_auth_verifier import SupabaseAuthVerifier
from linguabud_functions.adapters.supabase_conversation_repository import (
    SupabaseConversationRepository,
)
from linguabud_functions.adapters.supabase_email_log_repository import (
    SupabaseEmailLogRepository,
)
from linguabud_functions.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from linguabud_functions.domain.models import DeliveryLogEntry


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


class _InvalidToken(AuthError):
    def __init__(self) -> None:
        Exception.__init__(self, "invalid JWT")


@dataclass
class FakeAuth:
    users: dict[str, SimpleNamespace] = field(default_factory=dict)

    def get_user(self, jwt: str) -> SimpleNamespace:
        if jwt not in self.users:
            raise _InvalidToken
        return SimpleNamespace(user=self.users[jwt])


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    auth: FakeAuth = field(default_factory=FakeAuth)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_profile_repository_reads_both_tables() -> None:
    client = FakeSupabaseClient()
    client.table("users").queue(
        "select", [{"id": "u1", "email": "u1@example.com", "name": "Sam"}]
    )
    client.table("instructors").queue(
        "select",
        [
            {
                "id": "t1",
                "email": "t1@example.com",
                "email_notifications": False,
                "stripe_account_id": "acct_1",
                "price_per_lesson": 5000,
                "currency": "eur",
                "timezone": "Europe/Madrid",
            }
        ],
    )

    repository = SupabaseProfileRepository(client)  # type: ignore[arg-type]
    user = repository.get_user("u1")
    instructor = repository.get_instructor("t1")
    missing = repository.get_user("nobody")

    assert user is not None
    assert user.name == "Sam"
    assert user.notifications_enabled
    assert instructor is not None
    assert instructor.is_instructor
    assert not instructor.notifications_enabled
    assert instructor.price_per_lesson == 5000
    assert client.table("instructors").last_filters == [("id", "t1")]
    assert missing is None


def test_supabase_profile_repository_sets_stripe_account() -> None:
    client = FakeSupabaseClient()

    repository = SupabaseProfileRepository(client)  # type: ignore[arg-type]
    repository.set_stripe_account_id("t1", "acct_1")

    table = client.table("instructors")
    assert table.last_payload == {"stripe_account_id": "acct_1"}
    assert table.last_filters == [("id", "t1")]


def test_supabase_conversation_repository() -> None:
    client = FakeSupabaseClient()
    client.table("conversations").queue(
        "select",
        [
            {
                "id": "c1",
                "participants": ["a", "b"],
                "participant_details": {"a": {"name": "Alice"}},
            }
        ],
    )

    repository = SupabaseConversationRepository(client)  # type: ignore[arg-type]
    conversation = repository.get_conversation("c1")

    assert conversation is not None
    assert conversation.recipient_for("a") == "b"
    assert conversation.display_name("a") == "Alice"
    assert repository.get_conversation("c2") is None


def test_supabase_email_log_repository_omits_unset_columns() -> None:
    client = FakeSupabaseClient()

    repository = SupabaseEmailLogRepository(client)  # type: ignore[arg-type]
    repository.create_entry(
        DeliveryLogEntry(status="sent", recipient_id="b", email_id="email-1")
    )

    payload = client.table("email_log").last_payload
    assert isinstance(payload, dict)
    assert payload["status"] == "sent"
    assert payload["email_id"] == "email-1"
    assert "error" not in payload
    assert "sent_at" in payload


def test_supabase_auth_verifier() -> None:
    client = FakeSupabaseClient()
    client.auth.users["good"] = SimpleNamespace(id="u1", email="u1@example.com")

    verifier = SupabaseAuthVerifier(client)  # type: ignore[arg-type]

    caller = verifier.verify("good")
    assert caller is not None
    assert caller.uid == "u1"
    assert verifier.verify("bad") is None
