# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: donation / event-support checkout via the payment gateway."""
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from registration_api.core.config import settings
from registration_api.core.exceptions import PaymentGatewayError, ServerError
from registration_api.core.logging import get_logger
from registration_api.metrics import CHECKOUT_SESSIONS
from registration_api.services.payment_client import PaymentClient

logger = get_logger(__name__)


def to_minor_units(amount: float) -> int:
    """Convert a major-unit amount to cents, rounding halves up (25.005 -> 2501)."""
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_checkout_params(amount: float, name: Optional[str], email: Optional[str],
                          donation_type: Optional[str], event: Optional[str]) -> Dict[str, Any]:
    if donation_type == "event":
        product = {
            "name": f"Support Event: {event}",
            "description": f"Donation for event: {event}",
        }
    else:
        product = {
            "name": "General Offering",
            "description": "General church offering",
        }
    params: Dict[str, Any] = {
        "payment_method_types": ["card"],
        "line_items": [{
            "price_data": {
                "currency": settings.PAYMENT_CURRENCY,
                "product_data": product,
                "unit_amount": to_minor_units(amount),
            },
            "quantity": 1,
        }],
        "mode": "payment",
        "success_url": settings.PAYMENT_SUCCESS_URL,
        "cancel_url": settings.PAYMENT_CANCEL_URL,
        "metadata": {
            "donor_name": name or "",
            "donation_type": donation_type or "",
        },
    }
    if email:
        params["customer_email"] = email
    return params


class CheckoutService:
    def __init__(self, payment_client: PaymentClient) -> None:
        self._payments = payment_client

    async def create_session(self, amount: float, name: Optional[str], email: Optional[str],
                             donation_type: Optional[str], event: Optional[str] = None) -> str:
        params = build_checkout_params(amount, name, email, donation_type, event)
        label = "event" if donation_type == "event" else "general"
        try:
            session_id = await self._payments.create_checkout_session(params)
        except PaymentGatewayError as exc:
            CHECKOUT_SESSIONS.labels(type=label, status="failed").inc()
            raise ServerError(str(exc)) from exc
        CHECKOUT_SESSIONS.labels(type=label, status="created").inc()
        logger.info("Checkout session created id=%s type=%s amount=%s", session_id, label, amount)
        return session_id
