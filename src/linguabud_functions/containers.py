"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from linguabud_functions.adapters.agora_token_signer import AgoraTokenSigner
from linguabud_functions.adapters.resend_email_client import (
    EmailClient,
    HttpxResendClient,
)
from linguabud_functions.adapters.stripe_payment_processor import (
    StripePaymentProcessor,
)
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
from linguabud_functions.config import Settings
from linguabud_functions.services.auth import AuthService
from linguabud_functions.services.call_tokens import CallTokenService
from linguabud_functions.services.contact import ContactService
from linguabud_functions.services.email_log import EmailLogService
from linguabud_functions.services.notifications import (
    BookingNotificationService,
    MessageNotificationService,
)
from linguabud_functions.services.payments import PaymentService
from linguabud_functions.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    email_client: EmailClient
    auth_service: AuthService
    message_notification_service: MessageNotificationService
    booking_notification_service: BookingNotificationService
    call_token_service: CallTokenService
    contact_service: ContactService
    payment_service: PaymentService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    conversation_repository = SupabaseConversationRepository(supabase_client)
    email_log = EmailLogService(SupabaseEmailLogRepository(supabase_client))
    email_client = HttpxResendClient.create(
        api_key=resolved_settings.resend_api_key,
        from_address=resolved_settings.email_from,
    )
    message_notification_service = MessageNotificationService(
        conversation_repository=conversation_repository,
        profile_service=profile_service,
        email_client=email_client,
        email_log=email_log,
        messages_url=resolved_settings.messages_url,
        settings_url=resolved_settings.student_dashboard_url,
    )
    booking_notification_service = BookingNotificationService(
        profile_service=profile_service,
        email_client=email_client,
        email_log=email_log,
        dashboard_url=resolved_settings.instructor_dashboard_url,
    )
    call_token_service = CallTokenService(
        signer=AgoraTokenSigner(),
        app_id=resolved_settings.agora_app_id,
        app_certificate=resolved_settings.agora_app_certificate,
    )
    contact_service = ContactService(
        email_client=email_client,
        operator_email=resolved_settings.operator_email,
    )
    payment_service = PaymentService(
        processor=StripePaymentProcessor.create(resolved_settings.stripe_secret_key),
        profile_service=profile_service,
        refresh_url=resolved_settings.onboarding_refresh_url,
        return_url=resolved_settings.onboarding_return_url,
    )

    async def close_resources() -> None:
        await email_client.close()

    return AppContainer(
        settings=resolved_settings,
        email_client=email_client,
        auth_service=AuthService(SupabaseAuthVerifier(supabase_client)),
        message_notification_service=message_notification_service,
        booking_notification_service=booking_notification_service,
        call_token_service=call_token_service,
        contact_service=contact_service,
        payment_service=payment_service,
        close_resources=close_resources,
    )
