from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import ensure_farm_access
from src.domain.models.animal import Animal
from src.domain.value_objects.role import Role

GENDERS = {"male", "female"}


@dataclass(slots=True)
class CreateAnimalInput:
    farm_id: UUID
    species: str
    tag: str
    name: str | None = None
    breed: str | None = None
    gender: str | None = None
    birth_date: date | None = None


def ensure_can_create(role: Role) -> None:
    if not role.can_manage_animals():
        raise PermissionDenied("Role not allowed to create animals")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateAnimalInput,
) -> Animal:
    ensure_can_create(role)
    if not payload.tag.strip():
        raise ValidationError("tag is required")
    if not payload.species.strip():
        raise ValidationError("species is required")
    if payload.gender is not None and payload.gender not in GENDERS:
        raise ValidationError("gender must be male or female")
    await ensure_farm_access(uow, role, actor_user_id, payload.farm_id)

    animal = Animal.create(
        farm_id=payload.farm_id,
        species=payload.species.strip(),
        tag=payload.tag.strip(),
        name=payload.name,
        breed=payload.breed,
        gender=payload.gender,
        birth_date=payload.birth_date,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    return created
