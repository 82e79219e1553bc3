"""Request Dependencies: process-wide collaborators and bearer-token authentication.

Invariants:
    - TokenService, PaymentGateway and the password CryptContext are built once in the
      lifespan and read from app.state; nothing here touches the environment
    - Missing Authorization header or empty bearer token → AuthError (401)
    - Present but unverifiable token → InvalidTokenError (400)
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext

from qrdesk.core.errors import AuthError
from qrdesk.core.tokens import SessionClaims, TokenService
from qrdesk.infrastructure.stripe_client import PaymentGateway

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_context(request: Request) -> CryptContext:
    return request.app.state.password_context


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payment_gateway


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> SessionClaims:
    """Authenticate the caller from `Authorization: Bearer <token>`."""
    if credentials is None or not credentials.credentials:
        raise AuthError("Access Denied")
    return tokens.verify_token(credentials.credentials)
