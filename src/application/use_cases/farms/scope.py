from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.value_objects.role import Role


async def farm_scope(uow: UnitOfWork, role: Role, user_id: UUID) -> list[UUID] | None:
    """Farm ids visible to the caller; ``None`` means every farm."""
    if role.sees_all_farms():
        return None
    if role is Role.FARMER:
        return await uow.farms.list_ids_for_owner(user_id)
    return []


async def get_visible_animal(
    uow: UnitOfWork, role: Role, user_id: UUID, animal_id: UUID
) -> Animal:
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFound("Animal not found")
    scope = await farm_scope(uow, role, user_id)
    if scope is not None and animal.farm_id not in scope:
        # Same answer as a missing animal so ids of other farms do not leak
        raise NotFound("Animal not found")
    return animal


async def ensure_farm_access(uow: UnitOfWork, role: Role, user_id: UUID, farm_id: UUID) -> None:
    farm = await uow.farms.get(farm_id)
    if not farm:
        raise NotFound("Farm not found")
    if role is Role.ADMIN:
        return
    if role is not Role.FARMER or farm.owner_id != user_id:
        raise PermissionDenied("Farm belongs to another user")
