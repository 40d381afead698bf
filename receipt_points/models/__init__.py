from receipt_points.models.score_record import ScoreRecordModel  # noqa: F401
