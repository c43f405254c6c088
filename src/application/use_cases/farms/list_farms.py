from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.farm import Farm
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, actor_user_id: UUID) -> list[Farm]:
    if role.sees_all_farms():
        return await uow.farms.list()
    return await uow.farms.list(owner_id=actor_user_id)
