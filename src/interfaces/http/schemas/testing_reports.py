from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LabTestCreate(BaseModel):
    animal_id: UUID
    test_type: str = Field(min_length=1, max_length=100)
    sample_type: str = Field(min_length=1, max_length=100)
    test_description: str | None = None
    priority: Literal["routine", "urgent", "emergency"] = "routine"
    notes: str | None = None


class LabTestComplete(BaseModel):
    results: str = Field(min_length=1)
    notes: str | None = None


class LabTestResponse(BaseModel):
    id: UUID
    animal_id: UUID
    vet_id: UUID
    lab_id: UUID | None = None
    test_type: str
    test_description: str | None = None
    sample_type: str
    priority: str
    status: str
    results: str | None = None
    notes: str | None = None
    requested_at: datetime
    received_at: datetime | None = None
    completed_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
