"""Session Tokens: issue and verify signed, time-limited bearer tokens (PyJWT).

Invariants:
    - Tokens carry {userId, email, iat, exp}; exp = iat + expiry window (24h default)
    - verify_token checks signature, expiry and required claims before returning
      anything; every failure surfaces as InvalidTokenError
    - The signing secret is injected at construction and never read from the environment here

Design Decisions:
    - HS256 with a single process-wide secret: no key rotation, no refresh tokens
    - No revocation list: a leaked token stays valid until natural expiry
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from qrdesk.core.errors import InvalidTokenError

REQUIRED_CLAIMS = ("userId", "email", "iat", "exp")


@dataclass(frozen=True)
class SessionClaims:
    """Verified identity carried by a bearer token."""
    user_id: UUID
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Signs and verifies session tokens with a fixed secret."""

    def __init__(
        self, secret: str, algorithm: str = "HS256", expiry_hours: int = 24,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.expiry = timedelta(hours=expiry_hours)

    def issue_token(
        self, user_id: UUID, email: str, now: datetime | None = None,
    ) -> str:
        """Sign a token for the user, expiring `expiry` after `now`."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "userId": str(user_id),
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.expiry).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> SessionClaims:
        """Return the embedded claims or raise InvalidTokenError."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("expired")
        except jwt.InvalidTokenError:
            raise InvalidTokenError("malformed")

        try:
            user_id = UUID(str(payload["userId"]))
        except ValueError:
            raise InvalidTokenError("malformed")
        email = payload["email"]
        if not isinstance(email, str) or not email:
            raise InvalidTokenError("malformed")

        return SessionClaims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc),
            expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
        )
