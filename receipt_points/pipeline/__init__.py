"""
Receipt points pipeline.

Orchestrates: validate → score → store.
"""
import logging
from typing import Any

from receipt_points.errors import ReceiptValidationError
from receipt_points.pipeline.scoring import score_receipt
from receipt_points.pipeline.validator import validate_receipt
from receipt_points.store import ScoreStore

logger = logging.getLogger(__name__)


def process_receipt(payload: Any, store: ScoreStore) -> str:
    """Validate and score a decoded receipt payload, record the score.

    Returns the identifier under which the score was stored.
    """
    logger.info("Pipeline start — validate")
    try:
        receipt = validate_receipt(payload)
    except ReceiptValidationError as exc:
        logger.warning("Receipt rejected: %s", exc.reason.value)
        raise

    logger.info("Pipeline — score (%d items)", len(receipt.items))
    points = score_receipt(receipt)
    logger.info("Scored %d points for retailer %r", points, receipt.retailer)

    logger.info("Pipeline — store")
    return store.put(points)
