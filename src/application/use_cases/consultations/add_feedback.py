from __future__ import annotations

from uuid import UUID

from src.application.errors import InvalidStateError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.consultation_request import ConsultationRequest, ConsultationStatus
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    request_id: UUID,
    *,
    rating: int,
    feedback: str | None = None,
) -> ConsultationRequest:
    if role is not Role.FARMER:
        raise PermissionDenied("Only farmers can rate consultations")
    if rating < 1 or rating > 5:
        raise ValidationError("rating must be between 1 and 5")
    request = await uow.consultations.get(request_id)
    if not request or request.farmer_id != actor_user_id:
        raise NotFound("Consultation request not found")
    if request.status != ConsultationStatus.COMPLETED.value:
        raise InvalidStateError("Feedback is only accepted for completed consultations")
    request.rating = rating
    request.feedback = feedback
    request.touch()
    updated = await uow.consultations.update(request)
    await uow.commit()
    return updated
