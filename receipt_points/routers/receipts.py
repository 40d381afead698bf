"""
Receipt points API endpoints.

POST /receipts/process          — validate + score a receipt, return its id
GET  /receipts/{receipt_id}/points — points recorded for an id
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from receipt_points.pipeline import process_receipt
from receipt_points.schemas import ErrorResponse, PointsResponse, ProcessResponse
from receipt_points.store import ScoreStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post(
    "/receipts/process",
    response_model=ProcessResponse,
    responses={400: {"model": ErrorResponse, "description": "The receipt is invalid."}},
)
def process(payload: Any = Body(None), store: ScoreStore = Depends(get_store)):
    receipt_id = process_receipt(payload, store)
    return ProcessResponse(id=receipt_id)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get(
    "/receipts/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"model": ErrorResponse, "description": "No receipt found for that id."}},
)
def get_points(receipt_id: str, store: ScoreStore = Depends(get_store)):
    logger.info("Fetching points: %s", receipt_id)
    return PointsResponse(points=store.get(receipt_id))
