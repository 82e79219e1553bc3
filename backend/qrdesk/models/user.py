"""User ORM: registered account with a bcrypt password hash.

Invariants:
    - email is unique at the database level (uq_users_email); this index is the
      only guard against two concurrent signups for the same address
    - password_hash is never the plaintext password
    - Rows are never updated or deleted by the API
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from qrdesk.db.base import Base


class User(Base):
    """Account identity, keyed by email."""
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    qr_codes: Mapped[list["QRCode"]] = relationship(
        "QRCode", back_populates="user", lazy="noload",
    )
