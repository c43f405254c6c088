from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.consultations.create_consultation import validate_choices
from src.domain.models.consultation_request import (
    ConsultationPriority,
    ConsultationRequest,
    ConsultationStatus,
    ConsultationType,
)
from src.domain.value_objects.role import Role
from src.utils.datetime_tz import ensure_utc


@dataclass(slots=True)
class ScheduleVisitInput:
    farmer_id: UUID
    scheduled_at: datetime
    reason: str
    consultation_type: str = ConsultationType.VISIT.value
    priority: str = ConsultationPriority.MEDIUM.value
    animal_id: UUID | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: ScheduleVisitInput,
    *,
    now: datetime,
) -> ConsultationRequest:
    """A veterinarian books a visit directly with a farm owner."""
    if role is not Role.VETERINARIAN:
        raise PermissionDenied("Only veterinarians can schedule visits")
    if not payload.reason.strip():
        raise ValidationError("reason is required")
    scheduled_at = ensure_utc(payload.scheduled_at)
    if scheduled_at < now:
        raise ValidationError("scheduled_at must be in the future")
    validate_choices(payload.consultation_type, payload.priority)

    farmer = await uow.users.get(payload.farmer_id)
    if not farmer or farmer.role is not Role.FARMER:
        raise NotFound("Farmer not found")
    if payload.animal_id is not None:
        animal = await uow.animals.get(payload.animal_id)
        farm = await uow.farms.get(animal.farm_id) if animal else None
        if not farm or farm.owner_id != farmer.id:
            raise NotFound("Animal not found")

    request = ConsultationRequest.create(
        farmer_id=farmer.id,
        symptoms=payload.reason.strip(),
        consultation_type=payload.consultation_type,
        priority=payload.priority,
        status=ConsultationStatus.SCHEDULED.value,
        vet_id=actor_user_id,
        animal_id=payload.animal_id,
        notes=payload.notes,
        scheduled_at=scheduled_at,
    )
    created = await uow.consultations.add(request)
    await uow.commit()
    return created
