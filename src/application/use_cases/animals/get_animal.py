from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import get_visible_animal
from src.domain.models.animal import Animal
from src.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, actor_user_id: UUID, animal_id: UUID) -> Animal:
    return await get_visible_animal(uow, role, actor_user_id, animal_id)
