"""
Receipt validator.

Checks run in a fixed order and stop at the first failure:
shape → retailer → total → items → date/time. Monetary text is checked on
the submitted string, never on a float.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any

from receipt_points.errors import ReceiptValidationError, ValidationReason
from receipt_points.schemas import Item, Receipt

RETAILER_PATTERN = re.compile(r"[A-Za-z0-9\s&-]+")
DESCRIPTION_PATTERN = re.compile(r"[A-Za-z0-9\s-]+")
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
TIME_PATTERN = re.compile(r"\d{2}:\d{2}")

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------

def is_valid_amount(text: Any) -> bool:
    """True for non-negative amounts written with exactly two decimals.

    ``"3.10"`` passes; ``"3"``, ``"3.1"``, ``"3.100"``, ``"-1.00"``,
    ``"03.10"`` and ``" 3.10"`` do not.
    """
    if not isinstance(text, str):
        return False
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return False
    if not amount.is_finite() or amount.is_signed():
        return False
    return f"{amount:.2f}" == text


def is_valid_retailer(retailer: Any) -> bool:
    return isinstance(retailer, str) and RETAILER_PATTERN.fullmatch(retailer) is not None


def is_valid_description(description: Any) -> bool:
    return isinstance(description, str) and DESCRIPTION_PATTERN.fullmatch(description) is not None


def parse_purchase_date(value: Any) -> date | None:
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def parse_purchase_time(value: Any) -> time | None:
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        return None


def _is_present(value: Any) -> bool:
    """Presence as a JSON client sees it: empty arrays and objects count."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0
    return True


def _has_required_shape(payload: Any) -> bool:
    if not isinstance(payload, dict):
        return False
    required = ("retailer", "purchaseDate", "purchaseTime", "total")
    if not all(_is_present(payload.get(key)) for key in required):
        return False
    return isinstance(payload.get("items"), list)


def _parse_item(raw: Any) -> Item | None:
    if not isinstance(raw, dict):
        return None
    description = raw.get("shortDescription")
    price = raw.get("price")
    if not _is_present(description) or not _is_present(price):
        return None
    if not is_valid_description(description) or not is_valid_amount(price):
        return None
    return Item(short_description=description, price=price)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_receipt(payload: Any) -> Receipt:
    """Validate a decoded JSON payload and return an immutable ``Receipt``.

    Raises ``ReceiptValidationError`` carrying the first failed reason.
    """
    if not _has_required_shape(payload):
        raise ReceiptValidationError(ValidationReason.INVALID_FORMAT)

    if not is_valid_retailer(payload["retailer"]):
        raise ReceiptValidationError(ValidationReason.INVALID_RETAILER)

    if not is_valid_amount(payload["total"]):
        raise ReceiptValidationError(ValidationReason.INVALID_TOTAL)

    items: list[Item] = []
    for raw_item in payload["items"]:
        item = _parse_item(raw_item)
        if item is None:
            raise ReceiptValidationError(ValidationReason.INVALID_ITEM)
        items.append(item)

    purchase_date = parse_purchase_date(payload["purchaseDate"])
    purchase_time = parse_purchase_time(payload["purchaseTime"])
    if purchase_date is None or purchase_time is None:
        raise ReceiptValidationError(ValidationReason.INVALID_DATE_TIME)

    return Receipt(
        retailer=payload["retailer"],
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        total=payload["total"],
        items=tuple(items),
    )
