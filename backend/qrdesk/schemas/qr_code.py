"""QR Code Schemas: creation payload and the public record shape."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QRCodeCreate(BaseModel):
    """POST /create-qr body. Emptiness of data is checked by the store."""
    type: str = Field(min_length=1, max_length=50)
    data: Any


class QRCodeOut(BaseModel):
    """Public QR record: {id, userId, type, data, createdAt}."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    user_id: UUID
    type: str
    data: Any
    created_at: datetime


class QRCodeCreated(BaseModel):
    message: str
    qr: QRCodeOut


class QRCodeList(BaseModel):
    qrcodes: list[QRCodeOut]
