"""
Pydantic v2 models for validated receipts and the API envelopes.

Validated models are frozen: once the validator hands one out it is never
mutated. Monetary fields keep the exact text that was submitted and expose
an exact ``Decimal`` view for scoring.
"""
from __future__ import annotations

from datetime import date, time
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Validated receipt
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """One purchased line item."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(..., alias="shortDescription")
    price: str = Field(..., description="Exact two-decimal text, e.g. '6.49'")

    @property
    def price_amount(self) -> Decimal:
        return Decimal(self.price)

    @property
    def price_cents(self) -> int:
        return int(self.price.replace(".", ""))


class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str
    purchase_date: date = Field(..., alias="purchaseDate")
    purchase_time: time = Field(..., alias="purchaseTime")
    total: str = Field(..., description="Exact two-decimal text, e.g. '35.00'")
    items: tuple[Item, ...] = ()

    @property
    def total_amount(self) -> Decimal:
        return Decimal(self.total)

    @property
    def total_cents(self) -> int:
        return int(self.total.replace(".", ""))


class RulePoints(BaseModel):
    """Contribution of a single scoring rule."""
    rule: str
    points: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# API request / response envelopes
# ---------------------------------------------------------------------------

class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int = Field(..., ge=0)


class ErrorResponse(BaseModel):
    error: str
