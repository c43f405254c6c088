from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class MedicationResponse(BaseModel):
    id: UUID
    name: str
    active_ingredient: str
    withdrawal_period_milk_hours: int
    withdrawal_period_meat_days: int
    dosage_instructions: str | None = None

    model_config = ConfigDict(from_attributes=True)
