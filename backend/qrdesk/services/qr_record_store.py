"""QR Record Store: persist and list QR code payloads per owner.

Invariants:
    - Every record belongs to exactly one user; queries always filter by owner
    - type and data must be present (not None, not empty)
    - The owner row must exist at creation; otherwise NotFoundError (404)
    - Listing order is newest-first by created_at
"""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from qrdesk.core.errors import NotFoundError, ValidationError
from qrdesk.infrastructure.database import commit_or_raise
from qrdesk.models.qr_code import QRCode

logger = logging.getLogger(__name__)


def _is_absent(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (dict, list)):
        return not value
    return False


async def create_record(
    db: AsyncSession,
    owner_user_id: UUID,
    qr_type: str | None,
    data: Any,
    created_at: datetime | None = None,
) -> QRCode:
    """Store a QR payload for its owner, stamped with the current time."""
    if _is_absent(qr_type) or _is_absent(data):
        raise ValidationError("Type and data are required")

    record = QRCode(
        user_id=owner_user_id,
        type=qr_type,
        data=data,
        created_at=created_at or datetime.now(timezone.utc),
    )
    db.add(record)
    # Owner foreign key: a token can outlive its user row
    await commit_or_raise(db, NotFoundError("User not found."))
    logger.info(
        "QR code saved",
        extra={"user_id": str(owner_user_id), "qr_type": qr_type},
    )
    return record


async def list_records_for_user(
    db: AsyncSession, owner_user_id: UUID,
) -> list[QRCode]:
    result = await db.execute(
        select(QRCode)
        .where(QRCode.user_id == owner_user_id)
        .order_by(QRCode.created_at.desc()),
    )
    return list(result.scalars().all())
