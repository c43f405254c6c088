from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.user import User
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, vet_user_id: UUID, *, verified: bool) -> User:
    if role is not Role.ADMIN:
        raise PermissionDenied("Only admins can verify veterinarians")
    target = await uow.users.get(vet_user_id)
    if not target:
        raise NotFound("User not found")
    if target.role is not Role.VETERINARIAN:
        raise ValidationError("User is not a veterinarian")
    updated = await uow.users.set_vet_verified(vet_user_id, verified)
    if not updated:
        raise NotFound("User not found")
    await uow.commit()
    return updated
