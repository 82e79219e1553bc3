"""QRCode ORM: a generated QR code payload owned by exactly one user.

Invariants:
    - user_id references an existing user (foreign key)
    - type and data are non-null; data is any JSON value
    - created_at defaults to insertion time; listing sorts on it descending

Design Decisions:
    - JSON column for data: payload shape varies per QR type (URL, TEXT, WIFI, vCard...)
    - Composite index (user_id, created_at) serves the per-user newest-first listing
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, DateTime, JSON, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from qrdesk.db.base import Base


class QRCode(Base):
    """Stored QR code record."""
    __tablename__ = "qr_codes"
    __table_args__ = (
        Index("ix_qr_codes_user_id_created_at", "user_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False,
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    data: Mapped[Any] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship(
        "User", back_populates="qr_codes", lazy="noload",
    )
