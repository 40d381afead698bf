"""
Rule-based receipt scoring.

Every rule is a pure function of a validated ``Receipt`` returning a
non-negative integer. The receipt score is the sum over ``SCORING_RULES``.
Money is scored on integer cents taken from the validated text, so results
are exact for amounts of any length.
"""
from __future__ import annotations

from receipt_points.schemas import Receipt, RulePoints

POINTS_PER_ALNUM_CHARACTER = 1
POINTS_ROUND_DOLLAR = 50
POINTS_MULTIPLE_QUARTER = 25
POINTS_PER_TWO_ITEMS = 5
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_CENTS_PER_POINT = 500  # 0.2 points per dollar
POINTS_ODD_DAY = 6
POINTS_PURCHASE_TIME = 10
HOUR_START = 14  # 2:00 PM
HOUR_END = 16  # 4:00 PM

CENTS_PER_DOLLAR = 100
CENTS_PER_QUARTER = 25


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def retailer_points(receipt: Receipt) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return POINTS_PER_ALNUM_CHARACTER * sum(
        1 for ch in receipt.retailer if ch.isascii() and ch.isalnum()
    )


def round_dollar_points(receipt: Receipt) -> int:
    if receipt.total_cents % CENTS_PER_DOLLAR == 0:
        return POINTS_ROUND_DOLLAR
    return 0


def quarter_multiple_points(receipt: Receipt) -> int:
    if receipt.total_cents % CENTS_PER_QUARTER == 0:
        return POINTS_MULTIPLE_QUARTER
    return 0


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * POINTS_PER_TWO_ITEMS


def description_points(receipt: Receipt) -> int:
    """ceil(price * 0.2) for each item whose trimmed description length is a
    positive multiple of three."""
    points = 0
    for item in receipt.items:
        length = len(item.short_description.strip())
        if length and length % DESCRIPTION_LENGTH_FACTOR == 0:
            # ceiling division
            points += -(-item.price_cents // DESCRIPTION_CENTS_PER_POINT)
    return points


def odd_day_points(receipt: Receipt) -> int:
    if receipt.purchase_date.day % 2 == 1:
        return POINTS_ODD_DAY
    return 0


def purchase_time_points(receipt: Receipt) -> int:
    """Strictly after 14:00 and strictly before 16:00."""
    hour = receipt.purchase_time.hour
    minute = receipt.purchase_time.minute
    if (hour == HOUR_START and minute > 0) or HOUR_START < hour < HOUR_END:
        return POINTS_PURCHASE_TIME
    return 0


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SCORING_RULES = [
    ("retailer_characters", retailer_points),
    ("round_dollar", round_dollar_points),
    ("quarter_multiple", quarter_multiple_points),
    ("item_pairs", item_pair_points),
    ("description_length", description_points),
    ("odd_purchase_day", odd_day_points),
    ("afternoon_purchase", purchase_time_points),
]


def score_breakdown(receipt: Receipt) -> list[RulePoints]:
    """Per-rule contributions, in registry order."""
    return [RulePoints(rule=name, points=fn(receipt)) for name, fn in SCORING_RULES]


def score_receipt(receipt: Receipt) -> int:
    """Total points awarded to a validated receipt."""
    return sum(entry.points for entry in score_breakdown(receipt))
