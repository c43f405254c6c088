from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import get_visible_animal
from src.domain.models.treatment import Treatment
from src.domain.value_objects.role import Role


@dataclass
class ListTreatmentsResult:
    items: list[Treatment]
    total: int
    limit: int
    offset: int


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    animal_id: UUID,
    *,
    limit: int = 50,
    offset: int = 0,
) -> ListTreatmentsResult:
    if limit <= 0 or limit > 100:
        raise ValidationError("limit must be between 1 and 100")
    await get_visible_animal(uow, role, actor_user_id, animal_id)
    items = await uow.treatments.list_by_animal(animal_id, limit=limit, offset=offset)
    total = await uow.treatments.count_by_animal(animal_id)
    return ListTreatmentsResult(items=items, total=total, limit=limit, offset=offset)
