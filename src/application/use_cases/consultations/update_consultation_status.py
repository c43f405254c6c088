from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import (
    InvalidStateError,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.consultation_request import ConsultationRequest, ConsultationStatus
from src.domain.value_objects.role import Role
from src.utils.datetime_tz import ensure_utc


@dataclass(slots=True)
class UpdateConsultationStatusInput:
    status: str
    scheduled_at: datetime | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    request_id: UUID,
    payload: UpdateConsultationStatusInput,
) -> ConsultationRequest:
    if payload.status not in {s.value for s in ConsultationStatus}:
        raise ValidationError("Unknown consultation status")
    request = await uow.consultations.get(request_id)
    if not request:
        raise NotFound("Consultation request not found")

    if role is Role.FARMER:
        if request.farmer_id != actor_user_id:
            raise NotFound("Consultation request not found")
        # Farmers may only withdraw their own request
        if payload.status != ConsultationStatus.CANCELLED.value:
            raise PermissionDenied("Farmers can only cancel consultations")
    elif role is Role.VETERINARIAN:
        if request.vet_id != actor_user_id:
            raise PermissionDenied("Consultation is assigned to another veterinarian")
    elif role is not Role.ADMIN:
        raise PermissionDenied("Role not allowed to update consultations")

    if not request.can_transition_to(payload.status):
        raise InvalidStateError(
            f"Cannot move consultation from {request.status} to {payload.status}"
        )
    if payload.status == ConsultationStatus.SCHEDULED.value:
        if payload.scheduled_at is None:
            raise ValidationError("scheduled_at is required to schedule a consultation")
        request.scheduled_at = ensure_utc(payload.scheduled_at)
    if payload.notes is not None:
        request.notes = payload.notes
    request.status = payload.status
    request.touch()
    updated = await uow.consultations.update(request)
    await uow.commit()
    return updated
