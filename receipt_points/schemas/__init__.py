from receipt_points.schemas.receipt import (  # noqa: F401
    ErrorResponse,
    Item,
    PointsResponse,
    ProcessResponse,
    Receipt,
    RulePoints,
)
