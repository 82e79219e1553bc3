"""Application wiring: collaborators built from settings, startup and shutdown."""

import pytest
from fastapi import FastAPI

import qrdesk.main as main_module
from qrdesk.config import Settings
from qrdesk.core.tokens import TokenService
from qrdesk.infrastructure.database import DatabaseSessionManager
from qrdesk.infrastructure.stripe_client import PaymentGateway
from qrdesk.main import configure_services, lifespan


def _settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite+aiosqlite:///:memory:",
        "jwt_secret": "wiring-secret",
        "stripe_secret_key": "sk_test_wiring",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def use_settings(monkeypatch):
    """Point the lifespan at the given settings without touching global logging."""
    def _use(settings: Settings) -> None:
        monkeypatch.setattr(main_module, "get_settings", lambda: settings)
        monkeypatch.setattr(main_module, "setup_logging", lambda *args: None)
    return _use


def test_configure_services_uses_settings():
    settings = _settings(
        frontend_url="https://qr.example",
        donation_amount_cents=1000,
        jwt_expiry_hours=12,
    )
    app = FastAPI()
    configure_services(app, settings)

    assert isinstance(app.state.token_service, TokenService)
    assert app.state.token_service.expiry.total_seconds() == 12 * 3600
    assert isinstance(app.state.payment_gateway, PaymentGateway)
    assert app.state.payment_gateway.frontend_url == "https://qr.example"
    assert app.state.payment_gateway.product.unit_amount == 1000
    assert app.state.password_context.hash("pw").split("$")[2] == "10"


async def test_lifespan_aborts_when_database_unreachable(use_settings):
    use_settings(_settings(database_url="postgresql://u:p@127.0.0.1:1/qrdesk"))
    app = FastAPI()

    with pytest.raises(RuntimeError, match="Database connection failed"):
        async with lifespan(app):
            pass
    assert getattr(app.state, "token_service", None) is None


async def test_lifespan_wires_services_when_database_reachable(use_settings, tmp_path):
    use_settings(_settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'startup.db'}"))
    app = FastAPI()

    async with lifespan(app):
        assert isinstance(app.state.db_manager, DatabaseSessionManager)
        assert isinstance(app.state.token_service, TokenService)
        assert isinstance(app.state.payment_gateway, PaymentGateway)
    assert app.state.db_manager is None
