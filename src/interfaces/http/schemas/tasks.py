from __future__ import annotations

from datetime import date, datetime, time
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.models.task import TaskState


class TaskResponse(BaseModel):
    id: UUID
    treatment_id: UUID
    animal_id: UUID
    farmer_id: UUID
    medication_name: str
    dosage: str
    scheduled_date: date
    scheduled_time: time
    points_awarded: int
    is_completed: bool
    completed_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class TaskWithStateResponse(TaskResponse):
    state: TaskState
    days_overdue: int = 0


class CompleteTaskResponse(BaseModel):
    task: TaskResponse
    points_credited: bool
    reward_points: int | None = None
    warnings: list[str] = []
