"""Donation Routes: hosted checkout session for a fixed-price donation."""

from fastapi import APIRouter, Depends

from qrdesk.api.dependencies import get_payment_gateway
from qrdesk.infrastructure.stripe_client import PaymentGateway
from qrdesk.schemas.donation import CheckoutSessionResponse

router = APIRouter(tags=["donations"])


@router.post("/create-checkout-session", response_model=CheckoutSessionResponse)
async def create_checkout_session(
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    url = await gateway.create_donation_checkout()
    return CheckoutSessionResponse(url=url)
