from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.use_cases.treatments import record_treatment
from src.domain.models.animal import Animal
from src.domain.models.farm import Farm
from src.domain.models.medication import Medication
from src.domain.services.task_schedule import CadenceStrategy, TaskSchedulePolicy
from src.domain.value_objects.role import Role

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
POLICY = TaskSchedulePolicy()


class StubAnimals:
    def __init__(self, animal: Animal | None) -> None:
        self.animal = animal
        self.updates: list[dict] = []
        self.fail_update = False

    async def get(self, animal_id):
        if self.animal and self.animal.id == animal_id:
            return replace(self.animal)
        return None

    async def update(self, animal_id, data, expected_version):
        self.updates.append(data)
        if self.fail_update or expected_version != self.animal.version:
            return None
        for key, value in data.items():
            setattr(self.animal, key, value)
        self.animal.version += 1
        return replace(self.animal)


class StubRepo:
    def __init__(self, items=()) -> None:
        self.items = {item.id: item for item in items}
        self.added: list = []

    async def get(self, item_id):
        return self.items.get(item_id)

    async def add(self, item):
        self.added.append(item)
        return item

    async def add_many(self, items):
        self.added.extend(items)
        return items


def make_uow(animal: Animal | None, farm: Farm, medication: Medication):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        animals=StubAnimals(animal),
        farms=StubRepo([farm]),
        medications=StubRepo([medication]),
        treatments=StubRepo(),
        tasks=StubRepo(),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


@pytest.fixture()
def farmer_id():
    return uuid4()


@pytest.fixture()
def farm(farmer_id) -> Farm:
    return Farm.create(owner_id=farmer_id, farm_name="Farm", address="Road 1")


@pytest.fixture()
def animal(farm) -> Animal:
    return Animal.create(farm_id=farm.id, species="cattle", tag="COW-1")


@pytest.fixture()
def medication() -> Medication:
    return Medication.create(
        name="Oxytetracycline",
        active_ingredient="oxytetracycline",
        withdrawal_period_milk_hours=48,
        withdrawal_period_meat_days=5,
    )


def _payload(animal, medication, **extra):
    return record_treatment.RecordTreatmentInput(
        animal_id=animal.id,
        medication_id=medication.id,
        diagnosis="Mastitis",
        dosage="10 ml",
        **extra,
    )


@pytest.mark.asyncio
async def test_records_treatment_windows_and_tasks(animal, farm, medication, farmer_id):
    uow = make_uow(animal, farm, medication)
    vet_id = uuid4()

    result = await record_treatment.execute(
        uow, Role.VETERINARIAN, vet_id, _payload(animal, medication), task_policy=POLICY, now=NOW
    )

    assert result.treatment.vet_id == vet_id
    assert result.treatment.created_at == NOW
    assert result.animal.withdrawal_until_milk == NOW + timedelta(hours=48)
    assert result.animal.withdrawal_until_meat == NOW + timedelta(days=5)
    assert result.animal.status == "withdrawal"
    assert [task.scheduled_date.isoformat() for task in result.tasks] == [
        "2024-01-01",
        "2024-01-02",
        "2024-01-03",
    ]
    assert {task.farmer_id for task in result.tasks} == {farmer_id}
    assert {task.points_awarded for task in result.tasks} == {5}
    # One commit covers treatment, animal update and tasks
    assert uow.commits == [True]


@pytest.mark.asyncio
async def test_second_treatment_replaces_longer_window(animal, farm, medication):
    uow = make_uow(animal, farm, medication)
    await record_treatment.execute(
        uow, Role.VETERINARIAN, uuid4(), _payload(animal, medication), task_policy=POLICY, now=NOW
    )
    short = Medication.create(
        name="Short", active_ingredient="y", withdrawal_period_milk_hours=1
    )
    uow.medications.items[short.id] = short
    later = NOW + timedelta(hours=2)

    result = await record_treatment.execute(
        uow, Role.VETERINARIAN, uuid4(), _payload(animal, short), task_policy=POLICY, now=later
    )

    assert result.animal.withdrawal_until_milk == later + timedelta(hours=1)
    assert result.animal.withdrawal_until_meat == later
    assert result.animal.version == 3


@pytest.mark.asyncio
async def test_only_veterinarians_record(animal, farm, medication):
    uow = make_uow(animal, farm, medication)
    with pytest.raises(PermissionDenied):
        await record_treatment.execute(
            uow, Role.FARMER, uuid4(), _payload(animal, medication), task_policy=POLICY, now=NOW
        )
    assert uow.treatments.added == []


@pytest.mark.asyncio
async def test_validation_happens_before_any_write(animal, farm, medication):
    uow = make_uow(animal, farm, medication)
    payload = _payload(animal, medication)
    payload.dosage = "  "
    with pytest.raises(ValidationError):
        await record_treatment.execute(
            uow, Role.VETERINARIAN, uuid4(), payload, task_policy=POLICY, now=NOW
        )

    unknown = record_treatment.RecordTreatmentInput(
        animal_id=animal.id, medication_id=uuid4(), diagnosis="x", dosage="1 ml"
    )
    with pytest.raises(ValidationError):
        await record_treatment.execute(
            uow, Role.VETERINARIAN, uuid4(), unknown, task_policy=POLICY, now=NOW
        )

    bad_schedule = _payload(
        animal,
        medication,
        schedule=record_treatment.TaskPolicyOverride(strategy=CadenceStrategy.EXPLICIT_DATES),
    )
    with pytest.raises(ValidationError):
        await record_treatment.execute(
            uow, Role.VETERINARIAN, uuid4(), bad_schedule, task_policy=POLICY, now=NOW
        )
    assert uow.treatments.added == []
    assert uow.commits == []


@pytest.mark.asyncio
async def test_missing_animal(farm, medication, animal):
    uow = make_uow(None, farm, medication)
    with pytest.raises(NotFound):
        await record_treatment.execute(
            uow, Role.VETERINARIAN, uuid4(), _payload(animal, medication), task_policy=POLICY, now=NOW
        )


@pytest.mark.asyncio
async def test_stale_animal_version_conflicts(animal, farm, medication):
    uow = make_uow(animal, farm, medication)
    with pytest.raises(ConflictError):
        await record_treatment.execute(
            uow,
            Role.VETERINARIAN,
            uuid4(),
            _payload(animal, medication, animal_version=5),
            task_policy=POLICY,
            now=NOW,
        )
    assert uow.treatments.added == []


@pytest.mark.asyncio
async def test_concurrent_update_conflicts_without_commit(animal, farm, medication):
    uow = make_uow(animal, farm, medication)
    uow.animals.fail_update = True
    with pytest.raises(ConflictError):
        await record_treatment.execute(
            uow, Role.VETERINARIAN, uuid4(), _payload(animal, medication), task_policy=POLICY, now=NOW
        )
    assert uow.commits == []
    assert uow.tasks.added == []


def test_resolve_policy_overrides_only_given_fields():
    override = record_treatment.TaskPolicyOverride(count=5, points_per_task=2)
    policy = record_treatment.resolve_policy(POLICY, override)
    assert policy.count == 5
    assert policy.points_per_task == 2
    assert policy.strategy is POLICY.strategy
    assert record_treatment.resolve_policy(POLICY, None) is POLICY


@pytest.mark.asyncio
async def test_explicit_dates_before_treatment_start_rejected(animal, farm, medication):
    uow = make_uow(animal, farm, medication)
    payload = _payload(
        animal,
        medication,
        schedule=record_treatment.TaskPolicyOverride(
            strategy=CadenceStrategy.EXPLICIT_DATES,
            dates=[NOW.date() - timedelta(days=1), NOW.date()],
        ),
    )
    with pytest.raises(ValidationError):
        await record_treatment.execute(
            uow, Role.VETERINARIAN, uuid4(), payload, task_policy=POLICY, now=NOW
        )
    assert uow.treatments.added == []
