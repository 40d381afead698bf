"""
Score store: identifier → points, backed by SQLAlchemy.
"""
from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.orm import Session

from receipt_points.database import SessionLocal
from receipt_points.errors import ReceiptNotFoundError
from receipt_points.models import ScoreRecordModel

logger = logging.getLogger(__name__)


class ScoreStore:
    """Owns the identifier → points mapping.

    Records are insert-only. A single lock serializes identifier assignment
    and insertion, and reads share it so a session never sees a half-written
    record on a shared SQLite connection.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory
        self._lock = threading.Lock()

    def put(self, points: int) -> str:
        if isinstance(points, bool) or not isinstance(points, int) or points < 0:
            raise ValueError(f"points must be a non-negative integer, got {points!r}")

        with self._lock:
            db = self._session_factory()
            try:
                receipt_id = str(uuid.uuid4())
                while db.get(ScoreRecordModel, receipt_id) is not None:
                    receipt_id = str(uuid.uuid4())
                db.add(
                    ScoreRecordModel(
                        id=receipt_id,
                        points=points,
                        created_at=datetime.now(timezone.utc).isoformat(),
                    )
                )
                db.commit()
            finally:
                db.close()

        logger.info("Stored score %d under %s", points, receipt_id)
        return receipt_id

    def get(self, receipt_id: str) -> int:
        with self._lock:
            db = self._session_factory()
            try:
                row = db.get(ScoreRecordModel, receipt_id)
                points = row.points if row is not None else None
            finally:
                db.close()

        if points is None:
            logger.warning("Receipt not found: %s", receipt_id)
            raise ReceiptNotFoundError(receipt_id)
        return points


_default_store: ScoreStore | None = None
_default_lock = threading.Lock()


def get_store() -> ScoreStore:
    """FastAPI dependency returning the process-wide store."""
    global _default_store
    with _default_lock:
        if _default_store is None:
            _default_store = ScoreStore(SessionLocal)
    return _default_store
