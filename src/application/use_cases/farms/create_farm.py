from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.farm import Farm
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateFarmInput:
    farm_name: str
    address: str
    registration_number: str | None = None


async def execute(
    uow: UnitOfWork, role: Role, actor_user_id: UUID, payload: CreateFarmInput
) -> Farm:
    if role is not Role.FARMER:
        raise PermissionDenied("Only farmers can register farms")
    if not payload.farm_name.strip():
        raise ValidationError("farm_name is required")
    if not payload.address.strip():
        raise ValidationError("address is required")
    farm = Farm.create(
        owner_id=actor_user_id,
        farm_name=payload.farm_name.strip(),
        address=payload.address.strip(),
        registration_number=payload.registration_number,
    )
    created = await uow.farms.add(farm)
    await uow.commit()
    return created
