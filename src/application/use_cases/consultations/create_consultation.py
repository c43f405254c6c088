from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import get_visible_animal
from src.domain.models.consultation_request import (
    ConsultationPriority,
    ConsultationRequest,
    ConsultationType,
)
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateConsultationInput:
    symptoms: str
    consultation_type: str = ConsultationType.VISIT.value
    priority: str = ConsultationPriority.MEDIUM.value
    animal_id: UUID | None = None
    notes: str | None = None


def validate_choices(consultation_type: str, priority: str) -> None:
    if consultation_type not in {t.value for t in ConsultationType}:
        raise ValidationError("Unknown consultation type")
    if priority not in {p.value for p in ConsultationPriority}:
        raise ValidationError("Unknown consultation priority")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateConsultationInput,
) -> ConsultationRequest:
    if role is not Role.FARMER:
        raise PermissionDenied("Only farmers can request consultations")
    if not payload.symptoms.strip():
        raise ValidationError("symptoms are required")
    validate_choices(payload.consultation_type, payload.priority)
    if payload.animal_id is not None:
        await get_visible_animal(uow, role, actor_user_id, payload.animal_id)

    request = ConsultationRequest.create(
        farmer_id=actor_user_id,
        symptoms=payload.symptoms.strip(),
        consultation_type=payload.consultation_type,
        priority=payload.priority,
        animal_id=payload.animal_id,
        notes=payload.notes,
    )
    created = await uow.consultations.add(request)
    await uow.commit()
    return created
