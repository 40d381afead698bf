"""
Domain errors and their HTTP translation.

The pipeline raises these; FastAPI exception handlers turn them into
``{"error": ...}`` bodies. Anything else escaping the pipeline is a defect
and is left to propagate.
"""
from __future__ import annotations

import logging
from enum import Enum

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

logger = logging.getLogger(__name__)


class ValidationReason(str, Enum):
    INVALID_FORMAT = "InvalidFormat"
    INVALID_RETAILER = "InvalidRetailer"
    INVALID_TOTAL = "InvalidTotal"
    INVALID_ITEM = "InvalidItem"
    INVALID_DATE_TIME = "InvalidDateTime"

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    ValidationReason.INVALID_FORMAT: (
        "Invalid receipt format. Ensure all fields are provided and items is an array."
    ),
    ValidationReason.INVALID_RETAILER: (
        "Invalid retailer format. Ensure retailer matches the specified format."
    ),
    ValidationReason.INVALID_TOTAL: (
        "Invalid total format. Ensure total is a numeric value with two decimal places."
    ),
    ValidationReason.INVALID_ITEM: (
        "Invalid item format in items array. Each item must have a shortDescription "
        "that matches the specified format and a numeric price with two decimal places."
    ),
    ValidationReason.INVALID_DATE_TIME: (
        "Invalid date or time format. Ensure date is in YYYY-MM-DD format "
        "and time is in HH:MM format."
    ),
}

NOT_FOUND_MESSAGE = "Receipt not found."


class ReceiptValidationError(ValueError):
    """A submitted receipt failed one validation check."""

    def __init__(self, reason: ValidationReason):
        super().__init__(reason.message)
        self.reason = reason


class ReceiptNotFoundError(LookupError):
    """No score was recorded under the given identifier."""

    def __init__(self, receipt_id: str):
        super().__init__(NOT_FOUND_MESSAGE)
        self.receipt_id = receipt_id


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

def receipt_validation_handler(request: Request, exc: ReceiptValidationError):
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": exc.reason.message},
    )


def request_validation_handler(request: Request, exc: RequestValidationError):
    # body was not parseable JSON at all
    logger.warning("Unparseable request body: %s", exc.errors())
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": ValidationReason.INVALID_FORMAT.message},
    )


def receipt_not_found_handler(request: Request, exc: ReceiptNotFoundError):
    return JSONResponse(
        status_code=HTTP_404_NOT_FOUND,
        content={"error": NOT_FOUND_MESSAGE},
    )
