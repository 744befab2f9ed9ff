"""Application configuration."""

import os
from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

PLATFORM_FEE_RATE = Decimal("0.10")
CALL_TOKEN_TTL_SECONDS = 3600 * 24
MESSAGE_PREVIEW_LENGTH = 100
DEFAULT_SENDER_NAME = "A Lingua Bud user"
DEFAULT_STUDENT_NAME = "A student"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    resend_api_key: str
    stripe_secret_key: str
    webhook_secret: str
    agora_app_id: str = "dfd628e44de640e3b7717f422d1dc3e7"
    agora_app_certificate: str | None = None
    email_from: str = "Lingua Bud <notifications@linguabud.com>"
    operator_email: str = "support@linguabud.com"
    site_url: str = "https://linguabud.com"
    environment: str = _ENVIRONMENT
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def messages_url(self) -> str:
        """Front-end page listing conversations."""
        return f"{self.site_url}/messages.html"

    @property
    def student_dashboard_url(self) -> str:
        """Front-end page holding notification settings for students."""
        return f"{self.site_url}/student-dashboard.html"

    @property
    def instructor_dashboard_url(self) -> str:
        """Front-end page for instructors."""
        return f"{self.site_url}/instructor-dashboard.html"

    @property
    def onboarding_refresh_url(self) -> str:
        """Where Stripe sends instructors whose onboarding link expired."""
        return f"{self.instructor_dashboard_url}?stripe=refresh"

    @property
    def onboarding_return_url(self) -> str:
        """Where Stripe sends instructors after onboarding."""
        return f"{self.instructor_dashboard_url}?stripe=return"
