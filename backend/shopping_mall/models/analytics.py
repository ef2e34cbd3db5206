"""Analytics ORM — fraud detection records written by admins."""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shopping_mall.db.base import Base, SoftDeleteMixin


class FraudDetection(SoftDeleteMixin, Base):
    __tablename__ = "shopping_mall_fraud_detections"

    shopping_mall_order_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    member_user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    detection_type: Mapped[str] = mapped_column(String(50), nullable=False)
    risk_level: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    detected_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
