"""Donation Schemas: checkout session response."""

from pydantic import BaseModel


class CheckoutSessionResponse(BaseModel):
    url: str
