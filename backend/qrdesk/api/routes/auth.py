"""Auth Routes: signup and login, both answering with a fresh session token.

Invariants:
    - Signup issues a token only after the user row is committed
    - Unknown email on login → 404; wrong password → 401
"""

from fastapi import APIRouter, Depends, status
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from qrdesk.api.dependencies import get_password_context, get_token_service
from qrdesk.core.tokens import TokenService
from qrdesk.infrastructure.database import get_db
from qrdesk.schemas.auth import LoginRequest, SignupRequest, TokenResponse
from qrdesk.services.credential_store import authenticate_user, register_user

router = APIRouter(tags=["auth"])


@router.post(
    "/signup", response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    body: SignupRequest,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    password_context: CryptContext = Depends(get_password_context),
):
    user = await register_user(
        db, body.first_name, body.last_name, body.email, body.password,
        password_context,
    )
    return TokenResponse(
        message="User registered successfully",
        token=tokens.issue_token(user.id, user.email),
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    password_context: CryptContext = Depends(get_password_context),
):
    user = await authenticate_user(
        db, body.email, body.password, password_context,
    )
    return TokenResponse(
        message="Login successful!",
        token=tokens.issue_token(user.id, user.email),
    )
