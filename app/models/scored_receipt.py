"""
SQLAlchemy model for scored receipts.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from app.database import Base


class ScoredReceiptModel(Base):
    __tablename__ = "scored_receipts"

    id = Column(String(36), primary_key=True)
    points = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
