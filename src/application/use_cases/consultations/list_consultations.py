from __future__ import annotations

from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.consultation_request import ConsultationRequest, ConsultationStatus
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    *,
    status: str | None = None,
) -> list[ConsultationRequest]:
    if status is not None and status not in {s.value for s in ConsultationStatus}:
        raise ValidationError("Unknown consultation status")
    if role is Role.FARMER:
        return await uow.consultations.list(farmer_id=actor_user_id, status=status)
    if role is Role.VETERINARIAN:
        # Pending requests form the open queue every veterinarian can pick from
        if status == ConsultationStatus.PENDING.value:
            return await uow.consultations.list(status=status)
        return await uow.consultations.list(vet_id=actor_user_id, status=status)
    if role is Role.ADMIN:
        return await uow.consultations.list(status=status)
    raise PermissionDenied("Role not allowed to list consultations")
