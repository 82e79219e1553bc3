"""Credential Store: user registration, lookup and password login.

Invariants:
    - register_user writes at most one row; a duplicate email never overwrites
    - The pre-check (find_user_by_email) is advisory: the unique index on
      users.email decides concurrent races, and the loser gets ConflictError
    - bcrypt hashing/verification runs in the threadpool (CPU-bound)
"""

import logging

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from qrdesk.core.errors import AuthError, ConflictError, NotFoundError
from qrdesk.core.passwords import hash_password, verify_password
from qrdesk.infrastructure.database import commit_or_raise
from qrdesk.models.user import User

logger = logging.getLogger(__name__)


async def find_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def register_user(
    db: AsyncSession,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    password_context: CryptContext | None = None,
) -> User:
    """Create a user with a hashed password, or raise ConflictError."""
    if await find_user_by_email(db, email) is not None:
        raise ConflictError()

    password_hash = await run_in_threadpool(
        hash_password, password, password_context,
    )
    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=password_hash,
    )
    db.add(user)
    # Decides the race between concurrent signups for the same email
    await commit_or_raise(db, ConflictError())

    logger.info("User registered", extra={"user_id": str(user.id)})
    return user


async def authenticate_user(
    db: AsyncSession,
    email: str,
    password: str,
    password_context: CryptContext | None = None,
) -> User:
    """Return the user for valid credentials."""
    user = await find_user_by_email(db, email)
    if user is None:
        raise NotFoundError("User not found.")

    matches = await run_in_threadpool(
        verify_password, password, user.password_hash, password_context,
    )
    if not matches:
        raise AuthError("Invalid credentials.")

    logger.info("User logged in", extra={"user_id": str(user.id)})
    return user
