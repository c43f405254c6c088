from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

ConsultationTypeLiteral = Literal["visit", "video", "phone"]
PriorityLiteral = Literal["low", "medium", "high", "urgent"]


class ConsultationCreate(BaseModel):
    symptoms: str = Field(min_length=1)
    consultation_type: ConsultationTypeLiteral = "visit"
    priority: PriorityLiteral = "medium"
    animal_id: UUID | None = None
    notes: str | None = None


class ScheduleVisitRequest(BaseModel):
    farmer_id: UUID
    scheduled_at: datetime
    reason: str = Field(min_length=1)
    consultation_type: ConsultationTypeLiteral = "visit"
    priority: PriorityLiteral = "medium"
    animal_id: UUID | None = None
    notes: str | None = None


class ConsultationStatusUpdate(BaseModel):
    status: Literal["pending", "accepted", "scheduled", "completed", "cancelled"]
    scheduled_at: datetime | None = None
    notes: str | None = None


class ConsultationFeedback(BaseModel):
    rating: int = Field(ge=1, le=5)
    feedback: str | None = None


class ConsultationResponse(BaseModel):
    id: UUID
    farmer_id: UUID
    vet_id: UUID | None = None
    animal_id: UUID | None = None
    consultation_type: str
    priority: str
    symptoms: str
    notes: str | None = None
    scheduled_at: datetime | None = None
    status: str
    feedback: str | None = None
    rating: int | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
