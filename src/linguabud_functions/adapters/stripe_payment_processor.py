"""Stripe Connect payment processor adapter."""

from dataclasses import dataclass

import stripe

from linguabud_functions.domain.payments import ConnectedAccount, PaymentIntentRecord
from linguabud_functions.services.payments import PaymentProcessor


@dataclass
class StripePaymentProcessor(PaymentProcessor):
    """Payment processor backed by the Stripe API."""

    client: stripe.StripeClient

    @classmethod
    def create(cls, api_key: str) -> "StripePaymentProcessor":
        """Create a processor with its own Stripe client."""
        return cls(client=stripe.StripeClient(api_key))

    def create_connected_account(self, email: str | None) -> str:
        """Create an Express account able to take card payments and transfers."""
        params: dict[str, object] = {
            "type": "express",
            "capabilities": {
                "card_payments": {"requested": True},
                "transfers": {"requested": True},
            },
        }
        if email:
            params["email"] = email
        account = self.client.accounts.create(params=params)
        return account.id

    def create_onboarding_link(
        self, account_id: str, refresh_url: str, return_url: str
    ) -> str:
        """Create a one-time account onboarding link."""
        link = self.client.account_links.create(
            params={
                "account": account_id,
                "refresh_url": refresh_url,
                "return_url": return_url,
                "type": "account_onboarding",
            }
        )
        return link.url

    def retrieve_account(self, account_id: str) -> ConnectedAccount:
        """Fetch the account's live capability flags."""
        account = self.client.accounts.retrieve(account_id)
        return ConnectedAccount(
            id=account.id,
            charges_enabled=bool(account.charges_enabled),
            details_submitted=bool(account.details_submitted),
            payouts_enabled=bool(account.payouts_enabled),
        )

    def create_login_link(self, account_id: str) -> str:
        """Create an Express dashboard login link."""
        link = self.client.accounts.login_links.create(account_id)
        return link.url

    def create_payment_intent(  # noqa: PLR0913
        self,
        *,
        amount: int,
        currency: str,
        application_fee_amount: int,
        destination: str,
        metadata: dict[str, str],
    ) -> PaymentIntentRecord:
        """Create a destination charge withholding the platform fee."""
        intent = self.client.payment_intents.create(
            params={
                "amount": amount,
                "currency": currency,
                "application_fee_amount": application_fee_amount,
                "transfer_data": {"destination": destination},
                "automatic_payment_methods": {"enabled": True},
                "metadata": metadata,
            }
        )
        return PaymentIntentRecord(
            id=intent.id,
            client_secret=intent.client_secret,
            amount=intent.amount,
            currency=intent.currency,
        )
