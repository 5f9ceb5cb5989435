# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Payment client — Stripe hosted checkout.
"""

import asyncio
from typing import Any, Dict

import stripe

from registration_api.core.config import settings
from registration_api.core.exceptions import PaymentGatewayError
from registration_api.core.logging import get_logger

logger = get_logger(__name__)


class PaymentClient:
    """Thin wrapper around ``stripe.checkout.Session``."""

    def __init__(self, api_key: str = settings.STRIPE_SECRET_KEY) -> None:
        self._api_key = api_key

    def _create(self, params: Dict[str, Any]) -> str:
        if not self._api_key:
            raise PaymentGatewayError("Payment gateway is not configured")
        try:
            session = stripe.checkout.Session.create(api_key=self._api_key, **params)
        except stripe.StripeError as exc:
            logger.error("Stripe checkout creation failed: %s", exc)
            raise PaymentGatewayError(exc.user_message or str(exc)) from exc
        logger.info("Stripe checkout session created id=%s", session.id)
        return session.id

    async def create_checkout_session(self, params: Dict[str, Any]) -> str:
        """Create a hosted checkout session and return its identifier."""
        return await asyncio.to_thread(self._create, params)
