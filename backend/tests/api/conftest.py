"""API test fixtures: FastAPI app over an in-memory database.

Invariants:
    - get_db overridden to use the per-test SQLite session factory
    - app.state carries a test TokenService, a cost-10 CryptContext and a real
      PaymentGateway whose Stripe SDK call is monkeypatched per test
    - Lifespan does not run (httpx ASGITransport), so no real database is touched
"""

from types import SimpleNamespace

import pytest
import stripe
from httpx import ASGITransport, AsyncClient

from qrdesk.infrastructure.database import get_db
from qrdesk.infrastructure.stripe_client import PaymentGateway
from qrdesk.main import app

CHECKOUT_URL = "https://checkout.stripe.com/c/pay/cs_test_abc"


@pytest.fixture
async def client(test_session_factory, token_service, password_context):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.token_service = token_service
    app.state.password_context = password_context
    app.state.payment_gateway = PaymentGateway("sk_test_fake", "http://localhost:3000")

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def stripe_ok(monkeypatch):
    calls = []

    def _create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(id="cs_test_abc", url=CHECKOUT_URL)

    monkeypatch.setattr(stripe.checkout.Session, "create", _create)
    return calls


@pytest.fixture
def stripe_down(monkeypatch):
    def _create(**kwargs):
        raise stripe.APIConnectionError("Network error communicating with Stripe")

    monkeypatch.setattr(stripe.checkout.Session, "create", _create)


@pytest.fixture
def signup_user():
    async def _signup(
        client, email="ada@example.com", password="s3cret!",
        first="Ada", last="Lovelace",
    ):
        return await client.post("/signup", json={
            "firstName": first, "lastName": last,
            "email": email, "password": password,
        })
    return _signup


@pytest.fixture
def auth_headers(signup_user):
    """Sign up a user and return its Authorization header."""
    async def _headers(client, email="ada@example.com"):
        res = await signup_user(client, email=email)
        return {"Authorization": f"Bearer {res.json()['token']}"}
    return _headers
