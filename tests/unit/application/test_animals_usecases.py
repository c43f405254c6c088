from __future__ import annotations

from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.use_cases.animals import (
    create_animal,
    list_animals,
    update_animal,
)
from src.domain.models.animal import Animal
from src.domain.models.farm import Farm
from src.domain.value_objects.role import Role


class StubRepo:
    def __init__(self, existing: Animal | None = None) -> None:
        self.add_called = False
        self.add_input = None
        self.list_called = False
        self.existing = existing

    async def add(self, animal: Animal) -> Animal:
        self.add_called = True
        self.add_input = animal
        return animal

    async def list(self, *, farm_ids, status, search, limit, offset):
        self.list_called = True
        return []

    async def count(self, *, farm_ids, status, search):
        return 0

    async def get(self, animal_id):
        return self.existing

    async def update(self, animal_id, data, expected_version):
        return None


class StubFarms:
    def __init__(self, farm: Farm) -> None:
        self.farm = farm

    async def get(self, farm_id):
        return self.farm if farm_id == self.farm.id else None

    async def list_ids_for_owner(self, owner_id):
        return [self.farm.id] if owner_id == self.farm.owner_id else []


def make_uow(repo: StubRepo, farm: Farm):
    async def commit():
        return None

    async def rollback():
        return None

    return SimpleNamespace(
        animals=repo,
        farms=StubFarms(farm),
        commit=commit,
        rollback=rollback,
    )


@pytest.fixture()
def owner_id():
    return uuid4()


@pytest.fixture()
def farm(owner_id) -> Farm:
    return Farm.create(owner_id=owner_id, farm_name="Hillside", address="Lane 2")


@pytest.mark.asyncio
async def test_create_animal_denies_veterinarian(farm):
    repo = StubRepo()
    uow = make_uow(repo, farm)
    with pytest.raises(PermissionDenied):
        await create_animal.execute(
            uow,
            Role.VETERINARIAN,
            uuid4(),
            create_animal.CreateAnimalInput(farm_id=farm.id, species="cattle", tag="TAG-1"),
        )
    assert repo.add_called is False


@pytest.mark.asyncio
async def test_create_animal_rejects_blank_tag(farm, owner_id):
    repo = StubRepo()
    uow = make_uow(repo, farm)
    with pytest.raises(ValidationError):
        await create_animal.execute(
            uow,
            Role.FARMER,
            owner_id,
            create_animal.CreateAnimalInput(farm_id=farm.id, species="cattle", tag="   "),
        )
    assert repo.add_called is False


@pytest.mark.asyncio
async def test_create_animal_on_foreign_farm_denied(farm):
    repo = StubRepo()
    uow = make_uow(repo, farm)
    with pytest.raises(PermissionDenied):
        await create_animal.execute(
            uow,
            Role.FARMER,
            uuid4(),
            create_animal.CreateAnimalInput(farm_id=farm.id, species="cattle", tag="TAG-1"),
        )


@pytest.mark.asyncio
async def test_create_animal_starts_active(farm, owner_id):
    repo = StubRepo()
    uow = make_uow(repo, farm)
    created = await create_animal.execute(
        uow,
        Role.FARMER,
        owner_id,
        create_animal.CreateAnimalInput(farm_id=farm.id, species=" goat ", tag=" G-7 "),
    )
    assert repo.add_called is True
    assert created.tag == "G-7"
    assert created.species == "goat"
    assert created.status == "active"
    assert created.version == 1
    assert created.withdrawal_until_milk is None


@pytest.mark.asyncio
async def test_update_animal_version_conflict(farm, owner_id):
    existing = Animal.create(farm_id=farm.id, species="cattle", tag="existing")
    uow = make_uow(StubRepo(existing), farm)
    with pytest.raises(ConflictError):
        await update_animal.execute(
            uow,
            Role.FARMER,
            owner_id,
            existing.id,
            update_animal.UpdateAnimalInput(version=1, name="Bella"),
        )


@pytest.mark.asyncio
async def test_update_animal_hidden_from_other_farmer(farm):
    existing = Animal.create(farm_id=farm.id, species="cattle", tag="existing")
    uow = make_uow(StubRepo(existing), farm)
    with pytest.raises(NotFound):
        await update_animal.execute(
            uow,
            Role.FARMER,
            uuid4(),
            existing.id,
            update_animal.UpdateAnimalInput(version=1, name="Bella"),
        )


@pytest.mark.asyncio
async def test_list_animals_limit_validation(farm, owner_id):
    uow = make_uow(StubRepo(), farm)
    with pytest.raises(ValidationError):
        await list_animals.execute(uow, Role.FARMER, owner_id, limit=0)


@pytest.mark.asyncio
async def test_list_animals_farmer_without_farms_short_circuits(farm):
    repo = StubRepo()
    uow = make_uow(repo, farm)
    result = await list_animals.execute(uow, Role.FARMER, uuid4(), limit=10)
    assert result.items == []
    assert result.total == 0
    assert repo.list_called is False
