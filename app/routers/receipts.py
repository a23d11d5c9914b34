"""
Receipt points API endpoints.

POST /receipts/process        — score a receipt → {"id": ...}
GET  /receipts/{id}/points    — points awarded to a processed receipt
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.pipeline import lookup, submit
from app.pipeline.errors import ReceiptNotFound
from app.pipeline.store import ReceiptStore
from app.schemas import PointsResponse, ProcessResponse, Receipt

logger = logging.getLogger(__name__)
router = APIRouter()


def get_store(request: Request) -> ReceiptStore:
    """Receipt store dependency, created once in the app lifespan."""
    return request.app.state.store


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post("/receipts/process", response_model=ProcessResponse)
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)):
    logger.info("Process: retailer=%r  items=%d", receipt.retailer, len(receipt.items))
    return ProcessResponse(id=submit(receipt, store))


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    try:
        points = lookup(receipt_id, store)
    except ReceiptNotFound:
        raise HTTPException(status_code=404, detail="No receipt found for that ID.")
    return PointsResponse(points=points)
