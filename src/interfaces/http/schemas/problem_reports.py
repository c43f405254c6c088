from __future__ import annotations

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProblemReportCreate(BaseModel):
    problem_type: str = Field(min_length=1, max_length=100)
    symptoms: str = Field(min_length=1)
    severity: Literal["low", "medium", "high"] = "medium"
    description: str | None = None
    animal_id: UUID | None = None


class ProblemReportRespond(BaseModel):
    response: str = Field(min_length=1)


class ProblemReportResponse(BaseModel):
    id: UUID
    farmer_id: UUID
    animal_id: UUID | None = None
    problem_type: str
    symptoms: str
    severity: str
    description: str | None = None
    status: str
    vet_id: UUID | None = None
    vet_response: str | None = None
    responded_at: datetime | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
