"""
SQLAlchemy model for computed receipt scores.
"""
from sqlalchemy import Column, Integer, String

from receipt_points.database import Base


class ScoreRecordModel(Base):
    __tablename__ = "score_records"

    id = Column(String, primary_key=True)
    points = Column(Integer, nullable=False)
    created_at = Column(String, nullable=False)
