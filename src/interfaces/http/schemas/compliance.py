from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ComplianceSummaryResponse(BaseModel):
    total_animals: int
    compliant_animals: int
    restricted_animals: int
    by_status: dict[str, int]
    active_alerts: int
    alerts_by_severity: dict[str, int]
    compliance_rate: float

    model_config = ConfigDict(from_attributes=True)


class AlertCreate(BaseModel):
    alert_type: Literal["missed_task", "withdrawal_violation", "residue_detected", "other"]
    severity: Literal["low", "medium", "high"]
    description: str = Field(min_length=1)
    farm_id: UUID | None = None
    animal_id: UUID | None = None


class AlertResponse(BaseModel):
    id: UUID
    farm_id: UUID
    animal_id: UUID | None = None
    task_id: UUID | None = None
    alert_type: str
    severity: str
    description: str
    status: str
    created_at: datetime
    resolved_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class SweepResponse(BaseModel):
    animals_released: int
    alerts_created: int
    alerts_escalated: int
    alerts_resolved: int

    model_config = ConfigDict(from_attributes=True)
