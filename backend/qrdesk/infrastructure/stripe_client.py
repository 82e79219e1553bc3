"""Stripe Checkout Client: creates hosted checkout sessions for fixed-price donations.

Invariants:
    - Exactly one line item: fixed currency, fixed unit amount, quantity 1
    - Success/cancel URLs point back at the frontend (/payment-success, /payment-cancel)
    - All Stripe failures mapped to PaymentProviderError (core/errors.py)
    - No retry, no idempotency key, nothing persisted

Design Decisions:
    - api_key passed per call instead of setting stripe.api_key: no module-level SDK state
    - The SDK is synchronous; calls run in the threadpool so the event loop stays free
"""

import logging
from dataclasses import dataclass

import stripe
from fastapi.concurrency import run_in_threadpool

from qrdesk.core.errors import PaymentProviderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DonationProduct:
    """The single item sold by the donation checkout."""
    name: str = "Support Our Project"
    description: str = "Donate and support our work!"
    currency: str = "usd"
    unit_amount: int = 500  # smallest currency unit ($5.00)


class PaymentGateway:
    """Thin wrapper over stripe.checkout.Session for donations."""

    def __init__(
        self,
        api_key: str,
        frontend_url: str,
        product: DonationProduct | None = None,
    ):
        self._api_key = api_key
        self.frontend_url = frontend_url.rstrip("/")
        self.product = product or DonationProduct()

    def _checkout_params(self) -> dict:
        return {
            "payment_method_types": ["card"],
            "line_items": [
                {
                    "price_data": {
                        "currency": self.product.currency,
                        "product_data": {
                            "name": self.product.name,
                            "description": self.product.description,
                        },
                        "unit_amount": self.product.unit_amount,
                    },
                    "quantity": 1,
                },
            ],
            "mode": "payment",
            "success_url": f"{self.frontend_url}/payment-success",
            "cancel_url": f"{self.frontend_url}/payment-cancel",
        }

    async def create_donation_checkout(self) -> str:
        """Create a hosted checkout session and return its redirect URL."""
        try:
            session = await run_in_threadpool(
                stripe.checkout.Session.create,
                api_key=self._api_key,
                **self._checkout_params(),
            )
        except stripe.StripeError as e:
            logger.error(f"Stripe session error: {e}")
            raise PaymentProviderError(str(e))

        url = getattr(session, "url", None)
        if not url:
            logger.error("Stripe session created without a redirect URL")
            raise PaymentProviderError("checkout session has no url")

        logger.info(
            "Donation checkout session created",
            extra={"checkout_session_id": getattr(session, "id", None)},
        )
        return url
