from __future__ import annotations

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.compliance_status import ComplianceStatus


class AnimalCreate(BaseModel):
    farm_id: UUID
    species: str = Field(min_length=1, max_length=100)
    tag: str = Field(min_length=1, max_length=128)
    name: str | None = None
    breed: str | None = None
    gender: Literal["male", "female"] | None = None
    birth_date: date | None = None


class AnimalUpdate(BaseModel):
    version: int
    species: str | None = None
    tag: str | None = None
    name: str | None = None
    breed: str | None = None
    gender: Literal["male", "female"] | None = None
    birth_date: date | None = None


class AnimalResponse(BaseModel):
    id: UUID
    farm_id: UUID
    species: str
    tag: str
    name: str | None = None
    breed: str | None = None
    gender: str | None = None
    birth_date: date | None = None
    status: str
    withdrawal_until_milk: datetime | None = None
    withdrawal_until_meat: datetime | None = None
    created_at: datetime
    updated_at: datetime
    version: int

    model_config = ConfigDict(from_attributes=True)


class AnimalsListResponse(BaseModel):
    items: list[AnimalResponse]
    total: int
    limit: int
    offset: int


class AnimalComplianceResponse(BaseModel):
    animal_id: UUID
    status: ComplianceStatus
    is_compliant: bool
    withdrawal_until_milk: datetime | None = None
    withdrawal_until_meat: datetime | None = None
    evaluated_at: datetime

    model_config = ConfigDict(from_attributes=True)
