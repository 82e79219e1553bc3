"""Password Hashing: bcrypt via passlib, cost factor fixed at construction.

Invariants:
    - Plaintext passwords are never stored or logged
    - Cost factor is at least 10 (bcrypt "rounds")
    - verify_password never raises on a malformed stored hash, it answers False
"""

import logging

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

logger = logging.getLogger(__name__)

MIN_BCRYPT_ROUNDS = 10


def build_password_context(rounds: int = MIN_BCRYPT_ROUNDS) -> CryptContext:
    """Create a bcrypt CryptContext with the given cost factor."""
    if rounds < MIN_BCRYPT_ROUNDS:
        raise ValueError(
            f"bcrypt cost factor must be >= {MIN_BCRYPT_ROUNDS}, got {rounds}",
        )
    return CryptContext(
        schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds,
    )


_default_context = build_password_context()


def hash_password(password: str, context: CryptContext | None = None) -> str:
    return (context or _default_context).hash(password)


def verify_password(
    password: str, password_hash: str, context: CryptContext | None = None,
) -> bool:
    try:
        return (context or _default_context).verify(password, password_hash)
    except (UnknownHashError, ValueError) as e:
        logger.warning(f"Stored password hash could not be verified: {e}")
        return False
