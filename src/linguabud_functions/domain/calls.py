"""Models for video call tokens."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallToken:
    """A signed token granting access to one call channel."""

    token: str
    uid: int
    app_id: str
    expires_at: int
