from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FarmCreate(BaseModel):
    farm_name: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=512)
    registration_number: str | None = Field(default=None, max_length=100)


class FarmResponse(BaseModel):
    id: UUID
    owner_id: UUID
    farm_name: str
    address: str
    registration_number: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
