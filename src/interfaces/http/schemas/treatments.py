from __future__ import annotations

from datetime import date, datetime, time
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain.services.task_schedule import CadenceStrategy
from src.interfaces.http.schemas.animals import AnimalResponse
from src.interfaces.http.schemas.tasks import TaskResponse


class TaskScheduleRequest(BaseModel):
    strategy: CadenceStrategy | None = None
    count: int | None = Field(default=None, ge=1, le=90)
    interval_days: int | None = Field(default=None, ge=1, le=30)
    dates: list[date] | None = None
    scheduled_time: time | None = None
    points_per_task: int | None = Field(default=None, ge=0)


class TreatmentCreate(BaseModel):
    animal_id: UUID
    medication_id: UUID
    diagnosis: str = Field(min_length=1)
    dosage: str = Field(min_length=1, max_length=255)
    route_of_administration: str | None = Field(default=None, max_length=100)
    notes: str | None = None
    treatment_start_date: date | None = None
    treatment_end_date: date | None = None
    animal_version: int | None = Field(
        default=None, description="Reject the treatment if the animal changed since it was read"
    )
    schedule: TaskScheduleRequest | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "TreatmentCreate":
        if (
            self.treatment_start_date
            and self.treatment_end_date
            and self.treatment_end_date < self.treatment_start_date
        ):
            raise ValueError("treatment_end_date must not precede treatment_start_date")
        return self


class TreatmentResponse(BaseModel):
    id: UUID
    animal_id: UUID
    vet_id: UUID
    medication_id: UUID
    diagnosis: str
    dosage: str
    route_of_administration: str | None = None
    notes: str | None = None
    treatment_start_date: date | None = None
    treatment_end_date: date | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RecordTreatmentResponse(BaseModel):
    treatment: TreatmentResponse
    animal: AnimalResponse
    tasks: list[TaskResponse]


class TreatmentsListResponse(BaseModel):
    items: list[TreatmentResponse]
    total: int
    limit: int
    offset: int
