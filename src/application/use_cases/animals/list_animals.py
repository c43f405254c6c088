from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import farm_scope
from src.domain.models.animal import Animal
from src.domain.value_objects.animal_status import AnimalStatus
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class ListAnimalsResult:
    items: list[Animal]
    total: int


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    *,
    limit: int,
    offset: int = 0,
    farm_id: UUID | None = None,
    status: str | None = None,
    search: str | None = None,
) -> ListAnimalsResult:
    if limit <= 0 or limit > 100:
        raise ValidationError("limit must be between 1 and 100")
    if offset < 0:
        raise ValidationError("offset must be >= 0")
    if status is not None and status not in {s.value for s in AnimalStatus}:
        raise ValidationError("Unknown animal status")

    farm_ids = await farm_scope(uow, role, actor_user_id)
    if farm_id is not None:
        if farm_ids is not None and farm_id not in farm_ids:
            return ListAnimalsResult(items=[], total=0)
        farm_ids = [farm_id]
    if farm_ids == []:
        return ListAnimalsResult(items=[], total=0)

    items = await uow.animals.list(
        farm_ids=farm_ids, status=status, search=search, limit=limit, offset=offset
    )
    total = await uow.animals.count(farm_ids=farm_ids, status=status, search=search)
    return ListAnimalsResult(items=items, total=total)
