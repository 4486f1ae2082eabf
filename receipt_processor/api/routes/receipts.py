"""API routes for receipt submission and points lookup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from receipt_processor.api.dependencies import get_receipt_store
from receipt_processor.core.config import settings
from receipt_processor.core.observability import sentry_breadcrumb, sentry_set_tags
from receipt_processor.models.schemas import ErrorResponse, PointsResponse, ProcessResponse, Receipt
from receipt_processor.services.receipt_store import ReceiptStore

logger = logging.getLogger(__name__)

RECEIPT_NOT_FOUND_MESSAGE = "No receipt found for that ID."

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post(
    "/process",
    response_model=ProcessResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def process_receipt(
    receipt: Receipt,
    store: ReceiptStore = Depends(get_receipt_store),
) -> ProcessResponse:
    """Score a receipt and return the ID it was stored under."""
    receipt_id = store.submit(receipt)
    sentry_breadcrumb("receipts", "receipt processed", data={"receipt_id": receipt_id})
    return ProcessResponse(id=receipt_id)


@router.get(
    "/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
) -> PointsResponse:
    """Return the points awarded to a previously processed receipt."""
    sentry_set_tags({"receipt_id": receipt_id})
    points = store.lookup(receipt_id)
    if points is None:
        if settings.UNKNOWN_RECEIPT_RETURNS_ZERO:
            logger.info("[receipts:lookup] unknown id=%s answered with zero points", receipt_id)
            return PointsResponse(points=0)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RECEIPT_NOT_FOUND_MESSAGE)
    return PointsResponse(points=points)
