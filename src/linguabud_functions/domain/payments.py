"""Domain models and arithmetic for lesson payments."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class ConnectedAccount:
    """Live state of an instructor's payment-processor account."""

    id: str
    charges_enabled: bool
    details_submitted: bool = False
    payouts_enabled: bool = False


@dataclass(frozen=True)
class PaymentIntentRecord:
    """A payment intent created at the processor."""

    id: str
    client_secret: str
    amount: int
    currency: str


def compute_platform_fee(amount: int, rate: Decimal) -> int:
    """Return the platform's share of ``amount`` rounded to a minor unit."""
    fee = (Decimal(amount) * rate).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(fee)


def format_minor_units(amount: int, currency: str | None) -> str:
    """Format an integer minor-unit amount, e.g. ``5000`` -> ``50.00 USD``."""
    major = (Decimal(amount) / 100).quantize(Decimal("0.01"))
    if currency:
        return f"{major} {currency.upper()}"
    return str(major)
