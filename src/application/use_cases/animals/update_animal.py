from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ConflictError, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.create_animal import GENDERS
from src.application.use_cases.farms.scope import get_visible_animal
from src.domain.models.animal import Animal
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdateAnimalInput:
    version: int
    species: str | None = None
    tag: str | None = None
    name: str | None = None
    breed: str | None = None
    gender: str | None = None
    birth_date: date | None = None


def ensure_can_update(role: Role) -> None:
    if not role.can_manage_animals():
        raise PermissionDenied("Role not allowed to update animals")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    animal_id: UUID,
    payload: UpdateAnimalInput,
) -> Animal:
    ensure_can_update(role)
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    if payload.gender is not None and payload.gender not in GENDERS:
        raise ValidationError("gender must be male or female")
    existing = await get_visible_animal(uow, role, actor_user_id, animal_id)

    # Withdrawal fields and status are owned by treatment recording and the sweep
    data: dict = {}
    for field_name in ("species", "tag", "name", "breed", "gender", "birth_date"):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing
    updated = await uow.animals.update(animal_id, data=data, expected_version=payload.version)
    if not updated:
        raise ConflictError("Version mismatch while updating animal")
    await uow.commit()
    return updated
