"""
Receipt points core.

Orchestrates: derive id → score (first submission only) → store.
"""
import logging

from app.pipeline.errors import ReceiptNotFound
from app.pipeline.identity import receipt_id
from app.pipeline.points import calculate_points
from app.pipeline.store import ReceiptStore
from app.schemas import Receipt

logger = logging.getLogger(__name__)


def submit(receipt: Receipt, store: ReceiptStore) -> str:
    """Score and store a receipt unless its content was seen before.

    Returns the content-derived receipt id.
    """
    rid = receipt_id(receipt)
    if rid in store:
        logger.info("Receipt %s already scored", rid)
        return rid

    points = calculate_points(receipt)
    if store.put_if_absent(rid, points):
        logger.info("Scored receipt %s: %d points", rid, points)
    else:
        logger.info("Receipt %s was scored by a concurrent submission", rid)
    return rid


def lookup(rid: str, store: ReceiptStore) -> int:
    """Return the points for ``rid``; raises ``ReceiptNotFound``."""
    try:
        return store.get(rid)
    except ReceiptNotFound:
        logger.warning("Receipt not found: %s", rid)
        raise
