"""QRDesk API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map QRDeskError → structured JSON responses
    - Origin allow-list and CORS configured from settings (not hardcoded)
    - Settings resolved at import: a missing required variable aborts startup
    - Database connectivity verified in the lifespan: unreachable database aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - DatabaseSessionManager, TokenService, PaymentGateway and CryptContext live on
      app.state; routes get them through dependencies (api/dependencies.py)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qrdesk.api.cors import OriginAllowListMiddleware
from qrdesk.api.error_handlers import UnhandledErrorMiddleware, register_error_handlers
from qrdesk.api.routes import auth, donations, health, qr_codes
from qrdesk.config import Settings, get_settings
from qrdesk.core.passwords import build_password_context
from qrdesk.core.tokens import TokenService
from qrdesk.infrastructure.database import DatabaseSessionManager
from qrdesk.infrastructure.observability import setup_logging
from qrdesk.infrastructure.stripe_client import DonationProduct, PaymentGateway

logger = logging.getLogger(__name__)


def configure_services(app: FastAPI, settings: Settings) -> None:
    """Build the process-wide collaborators from settings."""
    app.state.token_service = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiry_hours=settings.jwt_expiry_hours,
    )
    app.state.password_context = build_password_context(settings.bcrypt_rounds)
    app.state.payment_gateway = PaymentGateway(
        settings.stripe_secret_key,
        settings.frontend_url,
        DonationProduct(
            name=settings.donation_product_name,
            description=settings.donation_product_description,
            currency=settings.donation_currency,
            unit_amount=settings.donation_amount_cents,
        ),
    )


def install_middleware(app: FastAPI, cors_origins: list[str]) -> None:
    """Add middleware innermost first: error body, then CORS, then the origin guard."""
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Outermost: disallowed origins never reach CORS or routing
    app.add_middleware(OriginAllowListMiddleware, allowed_origins=cors_origins)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if not await manager.health_check():
        logger.critical("Database unreachable at startup")
        await manager.dispose()
        raise RuntimeError("Database connection failed")
    logger.info("Database connected")

    app.state.db_manager = manager
    configure_services(app, settings)
    logger.info(f"QRDesk API started on port {settings.port}")
    yield
    app.state.db_manager = None
    await manager.dispose()
    logger.info("QRDesk API shutting down")


app = FastAPI(title="QRDesk API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
install_middleware(app, settings.cors_origins)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(qr_codes.router)
app.include_router(donations.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the API on HOST:PORT."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
