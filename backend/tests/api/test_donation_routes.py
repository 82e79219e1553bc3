"""Donation Routes: checkout session creation with the Stripe SDK stubbed."""

CHECKOUT_URL = "https://checkout.stripe.com/c/pay/cs_test_abc"


async def test_checkout_returns_redirect_url(client, stripe_ok):
    res = await client.post("/create-checkout-session")
    assert res.status_code == 200
    assert res.json() == {"url": CHECKOUT_URL}
    assert len(stripe_ok) == 1


async def test_checkout_needs_no_auth(client, stripe_ok):
    res = await client.post("/create-checkout-session", headers={"Authorization": "Bearer junk"})
    assert res.status_code == 200


async def test_provider_failure_is_generic_500(client, stripe_down):
    res = await client.post("/create-checkout-session")
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal server error"
    assert "Stripe" not in body["message"]
