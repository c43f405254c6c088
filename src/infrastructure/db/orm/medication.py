from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class MedicationORM(Base):
    __tablename__ = "medications"
    __table_args__ = (
        UniqueConstraint("med_name", name="ux_medications_name"),
        CheckConstraint("withdrawal_period_milk_hours >= 0", name="milk_hours_non_negative"),
        CheckConstraint("withdrawal_period_meat_days >= 0", name="meat_days_non_negative"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    med_name: Mapped[str] = mapped_column(String(255), nullable=False)
    active_ingredient: Mapped[str] = mapped_column(String(255), nullable=False)
    withdrawal_period_milk_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    withdrawal_period_meat_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dosage_instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
