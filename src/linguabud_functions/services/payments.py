"""Stripe Connect onboarding and lesson payments."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from linguabud_functions.config import PLATFORM_FEE_RATE
from linguabud_functions.domain.models import AuthenticatedCaller, Profile
from linguabud_functions.domain.payments import (
    ConnectedAccount,
    PaymentIntentRecord,
    compute_platform_fee,
)
from linguabud_functions.errors import CallableError, ErrorKind
from linguabud_functions.services.profiles import ProfileService

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "usd"


class PaymentProcessor(Protocol):
    """Interface for payment-processor interactions."""

    def create_connected_account(self, email: str | None) -> str:
        """Create a connected account and return its id."""

    def create_onboarding_link(
        self, account_id: str, refresh_url: str, return_url: str
    ) -> str:
        """Return a one-time onboarding URL for an account."""

    def retrieve_account(self, account_id: str) -> ConnectedAccount:
        """Fetch the live state of a connected account."""

    def create_login_link(self, account_id: str) -> str:
        """Return a dashboard login URL for an account."""

    def create_payment_intent(  # noqa: PLR0913
        self,
        *,
        amount: int,
        currency: str,
        application_fee_amount: int,
        destination: str,
        metadata: dict[str, str],
    ) -> PaymentIntentRecord:
        """Create a payment intent routed to a connected account."""


@dataclass
class PaymentService:
    """Application service for instructor payouts and student payments."""

    processor: PaymentProcessor
    profile_service: ProfileService
    refresh_url: str
    return_url: str
    fee_rate: Decimal = PLATFORM_FEE_RATE

    def create_connect_account(self, caller: AuthenticatedCaller) -> dict[str, object]:
        """Return an onboarding link, creating the connected account once."""
        instructor = self._require_instructor(caller.uid)
        account_id = instructor.stripe_account_id
        if not account_id:
            account_id = self.processor.create_connected_account(
                instructor.email or caller.email
            )
            self.profile_service.set_stripe_account_id(caller.uid, account_id)
            logger.info("Created connected account %s for %s", account_id, caller.uid)
        url = self.processor.create_onboarding_link(
            account_id, refresh_url=self.refresh_url, return_url=self.return_url
        )
        return {"url": url, "accountId": account_id}

    def get_connect_status(self, caller: AuthenticatedCaller) -> dict[str, object]:
        """Return the live status of the caller's connected account."""
        instructor = self.profile_service.get_instructor(caller.uid)
        if instructor is None or not instructor.stripe_account_id:
            raise CallableError(ErrorKind.NOT_FOUND, "No Stripe account found")
        account = self.processor.retrieve_account(instructor.stripe_account_id)
        dashboard_url = (
            self.processor.create_login_link(account.id)
            if account.charges_enabled
            else None
        )
        return {
            "accountId": account.id,
            "chargesEnabled": account.charges_enabled,
            "detailsSubmitted": account.details_submitted,
            "payoutsEnabled": account.payouts_enabled,
            "dashboardUrl": dashboard_url,
        }

    def create_payment_intent(
        self, caller: AuthenticatedCaller, instructor_id: str | None
    ) -> dict[str, object]:
        """Create a payment intent for one lesson with the instructor.

        The connected account's charge capability is checked live on every call.
        """
        if not instructor_id:
            raise CallableError(ErrorKind.INVALID_ARGUMENT, "Instructor ID is required")
        instructor = self._require_instructor(instructor_id)
        if not instructor.stripe_account_id:
            raise CallableError(
                ErrorKind.FAILED_PRECONDITION,
                "Instructor has not set up payments yet",
            )
        if not instructor.price_per_lesson or instructor.price_per_lesson <= 0:
            raise CallableError(
                ErrorKind.FAILED_PRECONDITION, "Instructor has no lesson price set"
            )
        account = self.processor.retrieve_account(instructor.stripe_account_id)
        if not account.charges_enabled:
            raise CallableError(
                ErrorKind.FAILED_PRECONDITION,
                "Instructor's payment account is not ready to accept charges",
            )

        amount = int(instructor.price_per_lesson)
        currency = (instructor.currency or DEFAULT_CURRENCY).lower()
        platform_fee = compute_platform_fee(amount, self.fee_rate)
        intent = self.processor.create_payment_intent(
            amount=amount,
            currency=currency,
            application_fee_amount=platform_fee,
            destination=account.id,
            metadata={"instructorId": instructor_id, "studentId": caller.uid},
        )
        logger.info(
            "Created payment intent %s for instructor %s", intent.id, instructor_id
        )
        return {
            "clientSecret": intent.client_secret,
            "amount": amount,
            "currency": currency,
            "platformFee": platform_fee,
        }

    def _require_instructor(self, instructor_id: str) -> Profile:
        instructor = self.profile_service.get_instructor(instructor_id)
        if instructor is None:
            raise CallableError(ErrorKind.NOT_FOUND, "Instructor profile not found")
        return instructor
