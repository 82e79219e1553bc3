"""QR Code Routes: create and list the caller's QR records (bearer auth required)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from qrdesk.api.dependencies import get_current_user
from qrdesk.core.tokens import SessionClaims
from qrdesk.infrastructure.database import get_db
from qrdesk.schemas.qr_code import QRCodeCreate, QRCodeCreated, QRCodeList, QRCodeOut
from qrdesk.services.qr_record_store import create_record, list_records_for_user

router = APIRouter(tags=["qr-codes"])


@router.post(
    "/create-qr", response_model=QRCodeCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_qr(
    body: QRCodeCreate,
    caller: SessionClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    record = await create_record(db, caller.user_id, body.type, body.data)
    return QRCodeCreated(
        message="QR Code saved successfully",
        qr=QRCodeOut.model_validate(record),
    )


@router.get("/my-qrcodes", response_model=QRCodeList)
async def my_qrcodes(
    caller: SessionClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's QR codes, newest first."""
    records = await list_records_for_user(db, caller.user_id)
    return QRCodeList(
        qrcodes=[QRCodeOut.model_validate(r) for r in records],
    )
