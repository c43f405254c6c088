from __future__ import annotations

from uuid import UUID

from src.application.errors import InvalidStateError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.consultation_request import ConsultationRequest, ConsultationStatus
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork, role: Role, actor_user_id: UUID, request_id: UUID
) -> ConsultationRequest:
    if role is not Role.VETERINARIAN:
        raise PermissionDenied("Only veterinarians can accept consultations")
    request = await uow.consultations.get(request_id)
    if not request:
        raise NotFound("Consultation request not found")
    if request.status != ConsultationStatus.PENDING.value:
        raise InvalidStateError(f"Cannot accept a consultation that is {request.status}")
    request.status = ConsultationStatus.ACCEPTED.value
    request.vet_id = actor_user_id
    request.touch()
    updated = await uow.consultations.update(request)
    await uow.commit()
    return updated
